"""G-code generation service."""
import logging
from typing import Any, List, Mapping, Tuple

from src.errors import ParameterError
from src.gcode_generator import GenerationResult, generate
from src.models import PlanParameters
from src.utils.validators import validate_plan, validate_hole_count

logger = logging.getLogger(__name__)


class GCodeService:
    """Service for G-code generation and validation."""

    @staticmethod
    def parse_params(data: Mapping[str, Any]) -> PlanParameters:
        """
        Build plan parameters from request data.

        Raises:
            ParameterError: If data is not a mapping or holds non-numeric values
        """
        if not isinstance(data, Mapping):
            raise ParameterError("Expected a JSON object of parameters")
        return PlanParameters.from_dict(data)

    @staticmethod
    def validate(params: PlanParameters, max_holes: int) -> Tuple[List[str], List[str]]:
        """
        Validate a plan before generating G-code.

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors, warnings = validate_plan(params)
        errors.extend(validate_hole_count(params, max_holes))
        return errors, warnings

    @staticmethod
    def generate(params: PlanParameters, filename: str) -> GenerationResult:
        """Generate the program for a validated plan."""
        logger.info(
            "Generating %d x %d grid (tool %s mm, hole %s mm, plate %s mm)",
            params.columns, params.rows,
            params.tool_diameter, params.hole_diameter, params.plate_diameter
        )
        return generate(params, filename=filename)

    @staticmethod
    def generate_download(params: PlanParameters, filename: str) -> Tuple[bytes, str]:
        """
        Generate G-code as file content for download.

        Returns:
            Tuple of (file bytes, filename)
        """
        result = GCodeService.generate(params, filename)
        return (result.gcode + '\n').encode('utf-8'), result.filename
