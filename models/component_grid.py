"""Grid of linear color factors produced by the cosine transform."""

from dataclasses import dataclass
import numpy as np


@dataclass
class ComponentGrid:
    """(components_y, components_x, 3) linear triples; index 0 is DC."""

    factors: np.ndarray

    @property
    def components_x(self) -> int:
        return self.factors.shape[1]

    @property
    def components_y(self) -> int:
        return self.factors.shape[0]

    @property
    def dc(self) -> np.ndarray:
        return self.factors[0, 0]

    @property
    def ac(self) -> np.ndarray:
        """AC triples in row-major order, x fastest, shape (N, 3)."""
        return self.factors.reshape(-1, 3)[1:]

    @classmethod
    def from_terms(cls, dc: np.ndarray, ac: np.ndarray, components_x: int, components_y: int) -> 'ComponentGrid':
        flat = np.vstack([np.reshape(dc, (1, 3)), np.reshape(ac, (-1, 3))])
        return cls(flat.reshape(components_y, components_x, 3))
