"""Application commands (use cases) for box net generation."""

from __future__ import annotations

import logging

from boxnets.application.config import (
    BoxConfiguration,
    ValidationResult,
    config_to_layout,
    validate_config,
)
from boxnets.domain import LAYOUTS, CutType, Drawing

from .dtos import NetOutput

logger = logging.getLogger(__name__)


class GenerateNetCommand:
    """Command to lay out the net of one box variant."""

    def execute(self, config: BoxConfiguration) -> NetOutput:
        """Validate the configuration and lay out the net.

        Geometry errors raised while laying out (a panel that would end up
        with a negative size) are returned in ``errors`` instead of being
        propagated.

        Args:
            config: A schema-valid configuration.

        Returns:
            NetOutput with the drawing, or with errors and an empty drawing.
        """
        variant = config.box.type
        default_file_name = LAYOUTS[variant].default_file_name
        margin = config.output.margin

        validation = validate_config(config)
        warnings = self._warning_messages(validation)
        for warning in warnings:
            logger.debug(f"Validation warning: {warning}")

        if not validation.is_valid:
            return NetOutput(
                drawing=Drawing(),
                variant=variant,
                default_file_name=default_file_name,
                margin=margin,
                errors=[f"{e.path}: {e.message}" for e in validation.errors],
                warnings=warnings,
            )

        try:
            drawing = config_to_layout(config).draw()
        except ValueError as e:
            logger.debug(f"Layout of {variant} failed: {e}")
            return NetOutput(
                drawing=Drawing(),
                variant=variant,
                default_file_name=default_file_name,
                margin=margin,
                errors=[str(e)],
                warnings=warnings,
            )

        output = NetOutput(
            drawing=drawing,
            variant=variant,
            default_file_name=default_file_name,
            margin=margin,
            warnings=warnings,
        )
        sheet = output.sheet_size
        logger.debug(f"Sheet size: {sheet.x:g} x {sheet.y:g} mm")
        logger.debug(
            f"{len(drawing.segments_of(CutType.CUT))} cut lines, "
            f"{len(drawing.segments_of(CutType.BEND))} bend lines"
        )
        return output

    @staticmethod
    def _warning_messages(validation: ValidationResult) -> list[str]:
        messages = []
        for w in validation.warnings:
            message = f"{w.path}: {w.message}"
            if w.suggestion:
                message += f" ({w.suggestion})"
            messages.append(message)
        return messages
