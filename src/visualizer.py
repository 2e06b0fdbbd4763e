import os

import matplotlib.pyplot as plt
import numpy as np

from .models import PlanParameters
from .pattern_expander import expand_hole_centers, travel_distance


def create_preview_figure(params: PlanParameters, dpi: int = 100, font_size: int = 8):
    """
    Draw the hole grid, pocket outlines and rapid travel path.

    Args:
        params: Plan parameters
        dpi: Plot resolution
        font_size: Font size for annotations

    Returns:
        The matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(10, 8), dpi=dpi)

    centers = expand_hole_centers(params)

    if centers:
        coords = np.array(centers, dtype=float)

        # Rapid travel in visit order
        ax.plot(coords[:, 0], coords[:, 1], linestyle=':', color='gray',
                linewidth=1, label="Rapid Travel")

        for i, (x, y) in enumerate(centers):
            plate = plt.Circle((x, y), params.plate_diameter / 2, color='red', fill=False,
                               linewidth=1.5, linestyle='--',
                               label="Plate Relief" if i == 0 else "")
            hole = plt.Circle((x, y), params.hole_diameter / 2, color='black', alpha=0.7,
                              label="Hole" if i == 0 else "")
            ax.add_patch(plate)
            ax.add_patch(hole)

        # Mark where the program starts and ends
        ax.plot(*coords[0], 'g^', markersize=8, label="First Hole")
        ax.plot(*coords[-1], 'rs', markersize=8, label="Last Hole")
        ax.legend(fontsize=font_size)

    ax.set_xlabel("X-axis (mm)", fontsize=font_size + 2)
    ax.set_ylabel("Y-axis (mm)", fontsize=font_size + 2)
    ax.set_title(
        f"Wasteboard Toolpath Preview\n"
        f"Hole: ⌀{params.hole_diameter:g} mm x {params.hole_depth:g} mm, "
        f"Plate: ⌀{params.plate_diameter:g} mm x {params.plate_depth:g} mm, "
        f"Tool: ⌀{params.tool_diameter:g} mm",
        fontsize=font_size + 4
    )
    ax.grid(True, alpha=0.3)
    ax.set_aspect('equal', adjustable='datalim')
    ax.margins(0.1)

    stats_text = (
        f"Grid: {params.columns} x {params.rows}\n"
        f"• {len(centers)} holes\n"
        f"• {travel_distance(centers):.1f} mm rapid travel"
    )
    ax.text(0.02, 0.02, stats_text, transform=ax.transAxes,
            fontsize=font_size, verticalalignment='bottom', horizontalalignment='left',
            bbox=dict(boxstyle="round,pad=0.5", facecolor="lightblue", alpha=0.8))

    fig.tight_layout()
    return fig


def plot_toolpath_preview(params: PlanParameters, output_file: str = None, dpi: int = 150):
    """
    Show an interactive preview, optionally saving it first.

    Args:
        params: Plan parameters
        output_file: Optional path to save the plot
        dpi: Plot resolution
    """
    fig = create_preview_figure(params, dpi=dpi)
    if output_file:
        fig.savefig(output_file, dpi=dpi, bbox_inches='tight')
    plt.show()


def save_plot_preview(params: PlanParameters, output_dir: str, base_filename: str) -> str:
    """
    Save a plot preview to the output directory without showing it.

    Args:
        params: Plan parameters
        output_dir: Directory for the image
        base_filename: Base name for the output file (without extension)

    Returns:
        Path of the saved PNG
    """
    plot_filename = os.path.join(output_dir, f"{base_filename}_preview.png")
    fig = create_preview_figure(params, dpi=150, font_size=10)
    fig.savefig(plot_filename, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return plot_filename
