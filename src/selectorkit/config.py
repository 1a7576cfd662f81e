from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuilderConfig:
    strict_combinators: bool = False  # reject anything but ' ', '+', '~', '>'
    freeze_on_render: bool = False  # stringify() locks the selector
