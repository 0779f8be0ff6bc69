"""Color values for the named-color catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RGB:
    """A 24-bit true color value."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b)):
            raise ValueError(f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})")

    @classmethod
    def from_hex(cls, hex_str: str) -> "RGB":
        """Create an RGB value from a ``#rrggbb`` string."""
        hex_str = hex_str.strip().lstrip('#')
        if len(hex_str) != 6:
            raise ValueError(f"Expected 6 hex digits, got {hex_str!r}")
        return cls(int(hex_str[0:2], 16), int(hex_str[2:4], 16), int(hex_str[4:6], 16))

    @property
    def hex(self) -> str:
        """Lowercase, zero-padded hex digits without the leading ``#``."""
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this color as foreground."""
        return f"38;2;{self.r};{self.g};{self.b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for this color as background."""
        return f"48;2;{self.r};{self.g};{self.b}"


@dataclass(frozen=True)
class ColorEntry:
    """A named color from the catalog."""
    name: str
    rgb: RGB
