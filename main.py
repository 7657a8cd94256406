"""
Main application entry point: find the pair of employees who worked together the longest.
"""
import os
import sys
import json
import time
import logging
import argparse
from datetime import date
from typing import Dict, List, Optional, Any

from config import AppConfig
from utils.logger import logger, setup_logger
from utils.discovery import find_csv_files, choose_file
from utils.parsing import AssignmentParseError, load_assignments, resolve_reference_date
from utils.validators import validate_assignments
from utils.generators import DataGenerator
from analysis.pipeline import find_longest_collaboration
from analysis.metrics import compute_overlap_metrics
from reporting import format_report, save_summary
from visualization import plot_pair_timeline, draw_collaboration_graph, export_to_excel


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        AppConfig: Application configuration
    """
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                config_dict = json.load(f)
            return AppConfig.from_dict(config_dict)
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")
            logger.info("Using default configuration.")
            return AppConfig()
    elif config_path:
        logger.warning(f"Config file {config_path} not found, using defaults.")
    return AppConfig()


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command-line options on top of the loaded configuration."""
    if args.reference_date:
        config.parser.reference_date = args.reference_date
    if args.strategy:
        config.overlap.strategy = args.strategy
    if args.jobs is not None:
        config.overlap.n_jobs = args.jobs
    if args.rank_by:
        config.overlap.rank_by = args.rank_by
    if args.data_dir:
        config.output.data_dir = args.data_dir
    return config


def resolve_input_file(args: argparse.Namespace, config: AppConfig) -> str:
    """Work out which assignment file to analyse."""
    if args.generate:
        generator = DataGenerator(seed=args.seed)
        assignments = generator.generate_assignments(
            num_employees=args.generate, num_projects=max(1, args.generate // 4)
        )
        # Generated open end dates are written as "null" and must resolve back
        config.parser.reference_date = generator.config["reference_date"].isoformat()
        path = os.path.join(config.output.data_dir, f"generated_{args.seed}.csv")
        return generator.write_csv(assignments, path)

    if args.file:
        return args.file

    files = find_csv_files(config.output.data_dir)
    chosen = choose_file(files)
    return os.path.join(config.output.data_dir, chosen)


def run_analysis(path: str, config: AppConfig) -> Dict[str, Any]:
    """
    Load a file and find the longest collaborating pair.

    Args:
        path: Assignment file
        config: Application configuration

    Returns:
        Dict[str, Any]: Analysis results
    """
    if not config.parser.reference_date:
        logger.info(f"No reference date given; open end dates resolve to {date.today()}.")
    reference_date = resolve_reference_date(config.parser)

    assignments = load_assignments(path, config.parser, reference_date)
    if not validate_assignments(assignments):
        raise ValueError(f"Invalid assignments in {path}")

    overlaps, result = find_longest_collaboration(assignments, config.overlap)
    metrics = compute_overlap_metrics(overlaps)

    return {
        "assignments": assignments,
        "overlaps": overlaps,
        "result": result,
        "metrics": metrics,
    }


def write_outputs(results: Dict[str, Any], args: argparse.Namespace, config: AppConfig) -> None:
    """Write the optional Excel report, plots and JSON summary."""
    if args.excel:
        export_to_excel(
            args.excel,
            results["assignments"],
            results["overlaps"],
            results["result"],
            results["metrics"],
        )

    if args.plots:
        logger.info("Generating visualizations...")
        plots_dir = config.output.plots_dir
        draw_collaboration_graph(
            results["overlaps"],
            highlight=results["result"],
            filename=os.path.join(plots_dir, "collaboration_graph.png"),
        )
        if results["result"] is not None:
            plot_pair_timeline(
                results["result"],
                results["assignments"],
                filename=os.path.join(plots_dir, "longest_pair_timeline.png"),
            )

    if args.summary:
        save_summary(args.summary, results["result"], results["metrics"])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the pair of employees who worked together the longest"
    )
    parser.add_argument("--file", help="Assignment CSV file to analyse")
    parser.add_argument("--data-dir", help="Directory to choose a CSV file from")
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument(
        "--reference-date",
        help="Date used for open (null) end dates, defaults to today",
    )
    parser.add_argument(
        "--strategy", choices=["pairwise", "sweep"], help="Overlap search strategy"
    )
    parser.add_argument(
        "--jobs", type=int, help="Parallel jobs over projects (-1 uses all cores)"
    )
    parser.add_argument(
        "--rank-by",
        choices=["record", "total"],
        help="Rank pairs by their longest single project or by total shared days",
    )
    parser.add_argument("--excel", help="Write an Excel report to this path")
    parser.add_argument("--plots", action="store_true", help="Save plots")
    parser.add_argument("--summary", help="Write a JSON summary to this path")
    parser.add_argument(
        "--generate", type=int, help="Generate synthetic data for N employees and analyse it"
    )
    parser.add_argument("--seed", type=int, default=42, help="Seed for --generate")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    # Set up logging
    setup_logger(level=getattr(logging, args.log_level), log_file=args.log_file)

    config = apply_overrides(load_config(args.config), args)

    try:
        path = resolve_input_file(args, config)
        results = run_analysis(path, config)
    except (AssignmentParseError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    print()
    for line in format_report(results["result"]):
        print(line)

    write_outputs(results, args, config)
    return 0


if __name__ == "__main__":
    start_time = time.time()
    exit_code = main()
    logger.info("--- %s seconds ---" % round((time.time() - start_time), 2))
    sys.exit(exit_code)
