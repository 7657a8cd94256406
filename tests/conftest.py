import matplotlib

# Plots in tests are written to files, never shown
matplotlib.use("Agg")
