"""Validation structures and geometry checks for box configurations.

Schema validation only guarantees that every size is positive. The checks in
this module look at how the sizes combine: a net whose glue flaps overlap or
whose walls are thinner than the cardboard cannot be folded.
"""

from dataclasses import dataclass, field
from typing import Any

from boxnets.application.config.adapter import config_to_layout, config_to_parameters
from boxnets.application.config.schema import (
    BoxConfiguration,
    CubeBoxConfig,
)
from boxnets.domain.services import BoxParameters, LidParameters


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "box.glue_flap")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _lid_length(params: BoxParameters | LidParameters) -> float:
    """Length of the lid top wall the two glue flaps sit on."""
    if isinstance(params, LidParameters) and params.fat:
        return params.length + params.thick_n(4)
    return params.length + params.thick_n(2)


def _outer_dimensions(params: BoxParameters | LidParameters) -> dict[str, float]:
    dims = {
        "length": params.length,
        "width": params.width,
        "height": params.height,
    }
    if isinstance(params, BoxParameters):
        dims["lid_height"] = params.lid_height
    return dims


def check_orientation(config: BoxConfiguration) -> ValidationResult:
    """Warn when the width is larger than the length.

    Layouts assume the long side is the length. Swapped sides still produce
    a foldable net, but the lid flaps end up on the short walls.
    """
    result = ValidationResult()
    params = config_to_parameters(config.box)
    if params.width > params.length:
        result.add_warning(
            path="box.width",
            message=(
                f"Width {params.width:g} is larger than length {params.length:g}"
            ),
            suggestion="Swap length and width so the width is the shorter side",
        )
    return result


def check_glue_flaps(config: BoxConfiguration) -> ValidationResult:
    """Error when both glue flaps together are longer than the lid."""
    result = ValidationResult()
    # The hinged lid puts its flaps on the outside of the rim
    if isinstance(config.box, CubeBoxConfig):
        return result

    params = config_to_parameters(config.box)
    lid_length = _lid_length(params)
    if params.glue_flap * 2 > lid_length:
        result.add_error(
            path="box.glue_flap",
            message=(
                f"Two glue flaps of {params.glue_flap:g} mm do not fit on a lid "
                f"{lid_length:g} mm long"
            ),
            value=params.glue_flap,
        )
    return result


def check_thickness(config: BoxConfiguration) -> ValidationResult:
    """Error when the cardboard is at least as thick as any outer dimension."""
    result = ValidationResult()
    params = config_to_parameters(config.box)
    for name, value in _outer_dimensions(params).items():
        if params.thickness >= value:
            result.add_error(
                path=f"box.{name}",
                message=(
                    f"Thickness {params.thickness:g} mm must be smaller than "
                    f"{name} {value:g} mm"
                ),
                value=value,
            )
    return result


def check_layout(config: BoxConfiguration) -> ValidationResult:
    """Error when a panel of the net would end up with a negative size.

    Each variant derives its panels from differences of the input sizes.
    """
    result = ValidationResult()
    try:
        config_to_layout(config).draw()
    except ValueError as e:
        result.add_error(
            path="box",
            message=f"Net cannot be laid out with these sizes: {e}",
        )
    return result


def validate_config(config: BoxConfiguration) -> ValidationResult:
    """Run every geometry check against a schema-valid configuration.

    Args:
        config: A validated BoxConfiguration instance

    Returns:
        ValidationResult with the combined errors and warnings
    """
    result = ValidationResult()
    result.merge(check_orientation(config))
    result.merge(check_glue_flaps(config))
    result.merge(check_thickness(config))
    if result.is_valid:
        result.merge(check_layout(config))
    return result
