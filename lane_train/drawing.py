import pygame


def shade_color(color, percent):
    """Lighten (positive) or darken (negative) a ``#rrggbb`` colour by `percent`."""
    if len(color) != 7 or not color.startswith("#"):
        raise ValueError(f"Expected a #rrggbb colour, got {color!r}")
    try:
        channels = [int(color[i:i + 2], 16) for i in (1, 3, 5)]
    except ValueError as e:
        raise ValueError(f"Expected a #rrggbb colour, got {color!r}") from e

    shaded = []
    for c in channels:
        c = int(c * (100 + percent) / 100)
        shaded.append(max(0, min(255, c)))
    return "#" + "".join(f"{c:02x}" for c in shaded)


def fill_gradient(surface, rect, top_color, bottom_color):
    # One horizontal line per row, interpolated top to bottom
    rect = pygame.Rect(*(int(v) for v in rect))
    if rect.height <= 0:
        return
    top = pygame.Color(top_color)
    bottom = pygame.Color(bottom_color)
    for i in range(rect.height):
        t = i / rect.height
        color = (
            top.r + (bottom.r - top.r) * t,
            top.g + (bottom.g - top.g) * t,
            top.b + (bottom.b - top.b) * t,
        )
        pygame.draw.line(surface, color, (rect.left, rect.top + i), (rect.right - 1, rect.top + i))
