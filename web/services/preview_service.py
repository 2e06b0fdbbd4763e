"""SVG preview generation service for hole grid visualization."""
from typing import List, Tuple

from src.models import PlanParameters
from src.pattern_expander import expand_hole_centers


# Color palette for preview elements
class Colors:
    """SVG color constants for preview elements."""
    HOLE = '#2F055A'         # Purple
    PLATE = '#5a7a8a'        # Teal
    TRAVEL = '#ff8c00'       # Orange
    START = '#5a8a6e'        # Green

    BACKGROUND = '#f8f9fa'   # Off-white
    BOARD_OUTLINE = '#dee2e6'  # Gray
    AXIS_LABEL = '#6c757d'   # Dark gray


class PreviewService:
    """Service for generating SVG previews of the hole grid."""

    # SVG rendering constants
    PADDING = 20
    SCALE = 2  # pixels per mm

    @staticmethod
    def generate_svg(params: PlanParameters, show_order: bool = False) -> str:
        """
        Generate SVG markup for a hole grid preview.

        The board extent covers every plate relief. Y grows upward, as on the
        machine.

        Args:
            params: Plan parameters
            show_order: Label each hole with its position in the visit order

        Returns:
            Complete SVG markup string
        """
        padding = PreviewService.PADDING
        scale = PreviewService.SCALE

        centers = expand_hole_centers(params)
        plate_radius = params.plate_diameter / 2
        width = max(params.columns - 1, 0) * params.column_spacing + params.plate_diameter
        height = max(params.rows - 1, 0) * params.row_spacing + params.plate_diameter

        svg_width = width * scale + padding * 2
        svg_height = height * scale + padding * 2

        def to_svg(x: float, y: float) -> Tuple[float, float]:
            sx = padding + (x + plate_radius) * scale
            sy = padding + (height - (y + plate_radius)) * scale
            return round(sx, 2), round(sy, 2)

        svg_parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {svg_width} {svg_height}" '
            f'width="{svg_width}" height="{svg_height}" style="background: {Colors.BACKGROUND};">',
            f'<rect x="{padding}" y="{padding}" width="{width * scale}" height="{height * scale}" '
            f'fill="none" stroke="{Colors.BOARD_OUTLINE}" stroke-width="1"/>',
        ]

        PreviewService._draw_travel(svg_parts, centers, to_svg)
        PreviewService._draw_holes(svg_parts, centers, params, to_svg, scale, show_order)

        svg_parts.append('</svg>')
        return ''.join(svg_parts)

    @staticmethod
    def _draw_travel(svg_parts: List[str], centers: List[Tuple[float, float]], to_svg) -> None:
        """Draw the rapid travel path between holes in visit order."""
        if len(centers) < 2:
            return
        points = ' '.join(f'{sx},{sy}' for sx, sy in (to_svg(x, y) for x, y in centers))
        svg_parts.append(
            f'<polyline points="{points}" fill="none" stroke="{Colors.TRAVEL}" '
            f'stroke-width="1" stroke-dasharray="4,3"/>'
        )

    @staticmethod
    def _draw_holes(
        svg_parts: List[str],
        centers: List[Tuple[float, float]],
        params: PlanParameters,
        to_svg,
        scale: float,
        show_order: bool
    ) -> None:
        """Draw plate reliefs and holes, the first hole highlighted."""
        for index, (x, y) in enumerate(centers):
            sx, sy = to_svg(x, y)
            hole_color = Colors.START if index == 0 else Colors.HOLE
            svg_parts.append(
                f'<circle cx="{sx}" cy="{sy}" r="{params.plate_diameter / 2 * scale}" '
                f'fill="none" stroke="{Colors.PLATE}" stroke-width="1"/>'
            )
            svg_parts.append(
                f'<circle cx="{sx}" cy="{sy}" r="{params.hole_diameter / 2 * scale}" '
                f'fill="{hole_color}"/>'
            )
            if show_order:
                svg_parts.append(
                    f'<text x="{sx + 4}" y="{sy - 4}" font-size="10" fill="{Colors.AXIS_LABEL}" '
                    f'font-family="Arial, sans-serif">{index + 1}</text>'
                )
