"""Field data structures for solver results."""
from dataclasses import dataclass, asdict
import numpy as np
import pandas as pd


@dataclass
class Fields:
    """Cell-centred solution fields.

    Staggered velocities are interpolated to the cell centres of the
    physical cells so that all quantities share one set of points.

    Parameters
    ----------
    u : np.ndarray
        x-velocity component at the cell centres, flattened.
    v : np.ndarray
        y-velocity component at the cell centres, flattened.
    p : np.ndarray
        Pressure at the cell centres, flattened.
    x : np.ndarray
        x-coordinates of the cell centres.
    y : np.ndarray
        y-coordinates of the cell centres.
    grid_points : np.ndarray
        Cell-centre coordinates, shape (N, 2).
    """
    u: np.ndarray
    v: np.ndarray
    p: np.ndarray
    x: np.ndarray
    y: np.ndarray
    grid_points: np.ndarray

    @classmethod
    def from_grid(cls, grid):
        """Sample a staggered grid at the centres of its physical cells.

        u is averaged over the left and right faces, v over the bottom and
        top faces; p is already cell centred.
        """
        u = grid.u.data
        v = grid.v.data
        p = grid.p.data

        u_c = 0.5 * (u[:-1, 1:-1] + u[1:, 1:-1])
        v_c = 0.5 * (v[1:-1, :-1] + v[1:-1, 1:])
        p_c = p[1:-1, 1:-1]

        X, Y = grid.cell_centers()
        return cls(
            u=u_c.ravel().copy(),
            v=v_c.ravel().copy(),
            p=p_c.ravel().copy(),
            x=X.ravel(),
            y=Y.ravel(),
            grid_points=np.column_stack([X.ravel(), Y.ravel()]),
        )

    def to_dataframe(self) -> pd.DataFrame:
        """Convert fields to DataFrame for analysis and plotting.

        Returns
        -------
        pd.DataFrame
            Wide-format DataFrame with columns: x, y, u, v, p.
            Excludes grid_points since x and y are already present.
        """
        data = asdict(self)
        data.pop('grid_points')
        return pd.DataFrame(data)
