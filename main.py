#!/usr/bin/env python3

import logging
import os
import sys

from config import Config
from src.gcode_generator import generate
from src.utils.file_manager import create_output_directory, write_program_file
from src.utils.share_link import encode_share_query
from src.utils.validators import validate_plan
from src.user_interface import get_plan_parameters, display_summary
from src.visualizer import plot_toolpath_preview, save_plot_preview


def main():
    """Main application entry point."""
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    print("=== Wasteboard G-code Generator ===")
    print("Generate G-code for a grid of stepped holes in a sacrificial board\n")

    output_dir = create_output_directory(Config.OUTPUT_DIR)
    output_file = os.path.join(output_dir, Config.OUTPUT_FILENAME)

    params = get_plan_parameters()

    errors, warnings = validate_plan(params)
    if errors:
        print("\n❌ ERROR: Invalid parameters:")
        for error in errors:
            print(f"- {error}")
        sys.exit(1)

    if not display_summary(params, output_file, warnings):
        print("Operation cancelled.")
        return

    try:
        print("\nGenerating G-code...")
        result = generate(params, filename=Config.OUTPUT_FILENAME)
        path = write_program_file(output_dir, result.gcode, result.filename)
        print(f"✅ G-code generated: {path} ({len(result.program)} lines, {result.hole_count} holes)")
        print(f"Share these parameters with: ?{encode_share_query(params)}")
    except Exception as e:
        print(f"\n❌ Error generating G-code: {str(e)}")
        sys.exit(1)

    show_plot = input("\nWould you like to see a visual preview of the toolpath? (y/n): ").lower().strip()
    if show_plot in ['y', 'yes']:
        try:
            print("Generating visual preview...")
            plot_filename = save_plot_preview(params, output_dir, "wasteboard")
            print(f"Plot saved to: {plot_filename}")
            plot_toolpath_preview(params)
        except Exception as e:
            print(f"⚠️  Could not generate visual preview: {str(e)}")

    show_gcode_preview = input("\nWould you like to see a preview of the generated G-code text? (y/n): ").lower().strip()
    if show_gcode_preview in ['y', 'yes']:
        lines = result.program.lines
        print("\n--- G-code Preview (first 10 lines) ---")
        for i, line in enumerate(lines[:10]):
            print(f"{i+1:2d}: {line}")
        if len(lines) > 10:
            print(f"... ({len(lines) - 10} more lines)")
        print()


if __name__ == "__main__":
    main()
