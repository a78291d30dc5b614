from dataclasses import dataclass


# Grid cell identity; value-equal and hashable so it can key the open/closed sets
@dataclass(frozen=True)
class Location:
    x: int  # column
    y: int  # row
