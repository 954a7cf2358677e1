"""
Lid-Driven Cavity Flow Visualization
=====================================

This script visualizes the MAC solution of the lid-driven cavity flow at the
end time together with the time step history of the run.
"""

# %%
# Setup and Load Data
# -------------------
# Import visualization utilities and load the computed solution from HDF5 file.

from utils import get_project_root, LDCPlotter

project_root = get_project_root()
data_dir = project_root / "data" / "MAC-Solver"
fig_dir = project_root / "figures" / "MAC-Solver"
fig_dir.mkdir(parents=True, exist_ok=True)

plotter = LDCPlotter(data_dir / "cavity_Re1000.h5")
print(f"Loaded solution from: {data_dir / 'cavity_Re1000.h5'}")

# %%
# Time History
# ------------
# Time step width and pressure solver effort over the simulated time.

plotter.plot_time_history(output_path=fig_dir / "cavity_Re1000_time_history.pdf")

# %%
# Velocity Fields
# ---------------
# u and v interpolated to the cell centres.

plotter.plot_velocity_fields(output_path=fig_dir / "cavity_Re1000_velocity.pdf")

# %%
# Pressure Field
# --------------

plotter.plot_pressure(output_path=fig_dir / "cavity_Re1000_pressure.pdf")

# %%
# Velocity Magnitude
# ------------------
# Magnitude with streamlines showing the primary vortex.

plotter.plot_velocity_magnitude(output_path=fig_dir / "cavity_Re1000_velocity_magnitude.pdf")

print(f"\nAll figures saved to: {fig_dir}")
