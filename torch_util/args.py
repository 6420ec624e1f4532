from dataclasses import dataclass

import constants


@dataclass
class DebugArgs:
    # Total number of scalars a compact preview aims to print
    element_budget: int = constants.ELEMENT_BUDGET

    # Significant digits for a rendered scalar, like a default C++ ostream
    scalar_precision: int = constants.SCALAR_PRECISION

    def __post_init__(self):
        if self.element_budget < 1:
            raise ValueError(f"element_budget must be at least 1, got {self.element_budget}")
        if self.scalar_precision < 1:
            raise ValueError(f"scalar_precision must be at least 1, got {self.scalar_precision}")


DEFAULT_ARGS = DebugArgs()
