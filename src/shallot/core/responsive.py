"""
Breakpoints and mobile-first responsive values.

A ResponsiveValue holds a sparse set of per-breakpoint values. Looking up a
breakpoint returns the value set there, or the one set at the nearest
smaller breakpoint, mirroring how ``min-width`` media queries cascade in
CSS. Values never flow downward: a value set only at ``LG`` does not apply
to ``SM``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Breakpoint(IntEnum):
    """Viewport tiers, ordered from the base tier upward."""

    XS = 0
    SM = 1
    MD = 2
    LG = 3
    XL = 4
    XXL = 5

    @property
    def label(self) -> str:
        return self.name.lower()

    def min_width(self) -> int:
        return _MIN_WIDTHS[self]

    def max_width(self) -> int | None:
        """Largest width inside this tier; None for the open-ended top tier."""
        if self is Breakpoint.XXL:
            return None
        return Breakpoint(self + 1).min_width() - 1

    def media_query(self) -> str | None:
        """``@media (min-width: Npx)`` gate; None for XS (the ungated base)."""
        if self.min_width() == 0:
            return None
        return f"@media (min-width: {self.min_width()}px)"

    def range_query(self) -> str:
        """Media query matching only this tier's width range."""
        max_width = self.max_width()
        if max_width is None:
            return f"@media (min-width: {self.min_width()}px)"
        return f"@media (min-width: {self.min_width()}px) and (max-width: {max_width}px)"

    def container_class(self) -> str:
        return f"sh-container-{self.label}"

    @classmethod
    def for_width(cls, width: int) -> Breakpoint:
        """Return the tier a viewport width falls into."""
        match = cls.XS
        for bp in cls:
            if width >= bp.min_width():
                match = bp
        return match


_MIN_WIDTHS: dict[Breakpoint, int] = {
    Breakpoint.XS: 0,
    Breakpoint.SM: 640,
    Breakpoint.MD: 768,
    Breakpoint.LG: 1024,
    Breakpoint.XL: 1280,
    Breakpoint.XXL: 1536,
}


class ResponsiveValue(Generic[T]):
    """Per-breakpoint values with downward fallback.

    ``ResponsiveValue(16).with_md(24)`` resolves to 16 on XS and SM and 24
    from MD upward. ``None`` is treated as "not set", so it cannot be stored
    as a value in its own right.
    """

    __slots__ = ("_values",)

    def __init__(self, base: T | None = None) -> None:
        self._values: dict[Breakpoint, T] = {}
        if base is not None:
            self._values[Breakpoint.XS] = base

    @classmethod
    def empty(cls) -> ResponsiveValue[T]:
        return cls()

    def with_value(self, breakpoint: Breakpoint, value: T) -> ResponsiveValue[T]:
        """Return a copy with ``value`` set at ``breakpoint``."""
        updated: ResponsiveValue[T] = ResponsiveValue()
        updated._values = dict(self._values)
        updated._values[breakpoint] = value
        return updated

    def with_xs(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.XS, value)

    def with_sm(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.SM, value)

    def with_md(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.MD, value)

    def with_lg(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.LG, value)

    def with_xl(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.XL, value)

    def with_xxl(self, value: T) -> ResponsiveValue[T]:
        return self.with_value(Breakpoint.XXL, value)

    def get(self, breakpoint: Breakpoint) -> T | None:
        """Resolve the value in effect at ``breakpoint``."""
        for tier in range(breakpoint, -1, -1):
            value = self._values.get(Breakpoint(tier))
            if value is not None:
                return value
        return None

    def defined(self) -> dict[Breakpoint, T]:
        """Explicitly set tiers, in breakpoint order."""
        return {bp: self._values[bp] for bp in Breakpoint if bp in self._values}

    def resolve_all(self) -> dict[Breakpoint, T | None]:
        return {bp: self.get(bp) for bp in Breakpoint}

    def __iter__(self) -> Iterator[tuple[Breakpoint, T]]:
        return iter(self.defined().items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResponsiveValue):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        # Hashable only when every stored value is, like a tuple
        return hash(tuple(self.defined().items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{bp.label}={value!r}" for bp, value in self)
        return f"ResponsiveValue({inner})"


# =============================================================================
# Layout configuration
# =============================================================================


def _default_max_widths() -> dict[Breakpoint, int]:
    return {bp: bp.min_width() for bp in Breakpoint if bp is not Breakpoint.XS}


@dataclass(frozen=True)
class ContainerConfig:
    """Centered page container: max width per tier plus responsive padding."""

    # max_widths is a dict, so equal configs cannot share a hash
    __hash__ = None  # type: ignore[assignment]

    max_widths: dict[Breakpoint, int] = field(default_factory=_default_max_widths)
    padding: ResponsiveValue[int] = field(
        default_factory=lambda: ResponsiveValue(16).with_md(24).with_lg(32)
    )
    center: bool = True


@dataclass(frozen=True)
class GridConfig:
    """Responsive grid: column count and gap per tier."""

    columns: ResponsiveValue[int] = field(
        default_factory=lambda: ResponsiveValue(1).with_sm(2).with_md(3).with_lg(4)
    )
    gap: ResponsiveValue[int] = field(
        default_factory=lambda: ResponsiveValue(16).with_md(24).with_lg(32)
    )


class FlexDirection(StrEnum):
    ROW = "row"
    COLUMN = "column"
    ROW_REVERSE = "row-reverse"
    COLUMN_REVERSE = "column-reverse"


class FlexWrap(StrEnum):
    NOWRAP = "nowrap"
    WRAP = "wrap"
    WRAP_REVERSE = "wrap-reverse"


class JustifyContent(StrEnum):
    """Main-axis distribution; values are the CSS keywords."""

    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BETWEEN = "space-between"
    AROUND = "space-around"
    EVENLY = "space-evenly"


class AlignItems(StrEnum):
    """Cross-axis alignment; values are the CSS keywords."""

    START = "flex-start"
    END = "flex-end"
    CENTER = "center"
    BASELINE = "baseline"
    STRETCH = "stretch"


@dataclass(frozen=True)
class FlexConfig:
    """Responsive flex container: direction, wrapping, alignment and gap per tier."""

    direction: ResponsiveValue[FlexDirection] = field(
        default_factory=lambda: ResponsiveValue(FlexDirection.ROW)
    )
    wrap: ResponsiveValue[FlexWrap] = field(
        default_factory=lambda: ResponsiveValue(FlexWrap.NOWRAP)
    )
    justify: ResponsiveValue[JustifyContent] = field(
        default_factory=lambda: ResponsiveValue(JustifyContent.START)
    )
    align: ResponsiveValue[AlignItems] = field(
        default_factory=lambda: ResponsiveValue(AlignItems.STRETCH)
    )
    gap: ResponsiveValue[int] = field(default_factory=lambda: ResponsiveValue(0))


def _wrap_media(breakpoint: Breakpoint, rules: list[str]) -> list[str]:
    query = breakpoint.media_query()
    if query is None:
        return rules
    lines = [f"{query} {{"]
    lines.extend(f"  {rule}" for rule in rules)
    lines.append("}")
    return lines


def generate_container_css(config: ContainerConfig) -> str:
    """
    Generate container CSS for every tier.

    Args:
        config: Container max widths and padding

    Returns:
        CSS string with the base rule and one media block per sized tier
    """
    padding = config.padding.get(Breakpoint.XS) or 0
    lines = [
        ".sh-container {",
        "  width: 100%;",
        "  margin-left: auto;",
        "  margin-right: auto;",
        f"  padding-left: {padding}px;",
        f"  padding-right: {padding}px;",
        "}",
    ]

    if config.center:
        lines.extend(
            [
                ".sh-container-center {",
                "  display: flex;",
                "  flex-direction: column;",
                "  align-items: center;",
                "}",
            ]
        )

    for bp in Breakpoint:
        max_width = config.max_widths.get(bp)
        if max_width is None:
            continue
        tier_padding = config.padding.get(bp) or 0
        rule = (
            f".sh-container {{ max-width: {max_width}px; "
            f"padding-left: {tier_padding}px; padding-right: {tier_padding}px; }}"
        )
        lines.extend(_wrap_media(bp, [rule]))

    return "\n".join(lines)


def generate_grid_css(config: GridConfig) -> str:
    """
    Generate grid CSS with per-tier column counts and gaps.

    Tiers whose resolved value matches the tier below are skipped, since
    the cascade already carries the smaller tier's rule upward.

    Args:
        config: Grid columns and gap

    Returns:
        CSS string
    """
    lines = [".sh-grid {", "  display: grid;", "}"]

    previous: tuple[int | None, int | None] = (None, None)
    for bp in Breakpoint:
        current = (config.columns.get(bp), config.gap.get(bp))
        if current == previous:
            continue
        columns, gap = current
        rules: list[str] = []
        if columns is not None:
            rules.append(f".sh-grid {{ grid-template-columns: repeat({columns}, minmax(0, 1fr)); }}")
        if gap is not None:
            rules.append(f".sh-grid {{ gap: {gap}px; }}")
        lines.extend(_wrap_media(bp, rules))
        previous = current

    return "\n".join(lines)


def generate_flex_css(config: FlexConfig) -> str:
    """
    Generate flex container CSS with per-tier direction, wrap, alignment and gap.

    Like the grid, a tier is only emitted when something changes from the
    tier below it.

    Args:
        config: Flex settings

    Returns:
        CSS string
    """
    lines = [".sh-flex {", "  display: flex;", "}"]

    previous: tuple[object, ...] | None = None
    for bp in Breakpoint:
        direction = config.direction.get(bp)
        wrap = config.wrap.get(bp)
        justify = config.justify.get(bp)
        align = config.align.get(bp)
        gap = config.gap.get(bp)
        current = (direction, wrap, justify, align, gap)
        if current == previous:
            continue
        previous = current

        declarations: list[str] = []
        if direction is not None:
            declarations.append(f"flex-direction: {direction};")
        if wrap is not None:
            declarations.append(f"flex-wrap: {wrap};")
        if justify is not None:
            declarations.append(f"justify-content: {justify};")
        if align is not None:
            declarations.append(f"align-items: {align};")
        if gap is not None:
            declarations.append(f"gap: {gap}px;")
        if not declarations:
            continue
        lines.extend(_wrap_media(bp, [f".sh-flex {{ {' '.join(declarations)} }}"]))

    return "\n".join(lines)
