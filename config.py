"""
Configuration management for the application.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional


DEFAULT_DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y.%m.%d",
    "%Y/%m/%d",
    "%Y%m%d",
    "%a, %d %b %Y",
    "%d %b %Y",
    "%d.%m.%Y",
    "%m/%d/%Y",
]


@dataclass
class ParserConfig:
    """Configuration for reading assignment files."""

    delimiter: str = ","
    date_formats: List[str] = field(default_factory=lambda: list(DEFAULT_DATE_FORMATS))
    null_tokens: List[str] = field(default_factory=lambda: ["null", "NULL", ""])
    reference_date: Optional[str] = None
    has_header: Optional[bool] = None


@dataclass
class OverlapConfig:
    """Configuration for the overlap computation."""

    strategy: str = "pairwise"
    n_jobs: int = 1
    backend: Optional[str] = None
    rank_by: str = "record"
    keep_zero_day_overlaps: bool = True


@dataclass
class OutputConfig:
    """Configuration for input and output locations."""

    data_dir: str = "data"
    output_dir: str = "output"
    plots_dir: str = "plots"


@dataclass
class AppConfig:
    """Main application configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    overlap: OverlapConfig = field(default_factory=OverlapConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "AppConfig":
        """Create a configuration from a flat dictionary."""
        # Extract each section and create appropriate config objects
        parser_config = ParserConfig(
            **{
                k.split("_", 1)[1].lower(): v
                for k, v in config_dict.items()
                if k.startswith("PARSER_")
            }
        )

        overlap_config = OverlapConfig(
            strategy=config_dict.get("OVERLAP_STRATEGY", "pairwise"),
            n_jobs=config_dict.get("OVERLAP_N_JOBS", 1),
            backend=config_dict.get("OVERLAP_BACKEND"),
            rank_by=config_dict.get("OVERLAP_RANK_BY", "record"),
            keep_zero_day_overlaps=config_dict.get("OVERLAP_KEEP_ZERO_DAY", True),
        )

        output_config = OutputConfig(
            **{
                k.split("_", 1)[1].lower(): v
                for k, v in config_dict.items()
                if k.startswith("OUTPUT_")
            }
        )

        return cls(parser=parser_config, overlap=overlap_config, output=output_config)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a flat dictionary."""
        result = {}

        for key, value in vars(self.parser).items():
            result[f"PARSER_{key.upper()}"] = value

        for key, value in vars(self.overlap).items():
            if key == "keep_zero_day_overlaps":
                result["OVERLAP_KEEP_ZERO_DAY"] = value
            else:
                result[f"OVERLAP_{key.upper()}"] = value

        for key, value in vars(self.output).items():
            result[f"OUTPUT_{key.upper()}"] = value

        return result
