from dataclasses import dataclass, replace


@dataclass
class Stats:
    max_hp: int = 10
    hp: int = 10
    attack: int = 6
    defense: int = 1
    speed: int = 10     # higher is faster; initiative belongs to the caller

    def copy(self) -> "Stats":
        return replace(self)
