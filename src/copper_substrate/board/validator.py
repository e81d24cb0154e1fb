"""Component descriptor validation.

The footprint serializer deliberately accepts whatever a component returns.
This module offers opt-in checks a caller can run before exporting, to catch
geometry and bookkeeping mistakes that would otherwise end up in the file:

- Inverted bounding boxes and negative courtyard margins
- Roundrect ratios on non-roundrect pads (and missing ones on roundrect pads)
- Drill sizes on SMD pads, missing drills on drilled pads
- Duplicate pad numbers and duplicate identity tokens
- Graphic variants the serializer does not render
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List

from ..core.types import PadShape, PadType, Severity
from ..exceptions import ValidationError
from .elements import GraphicLine

if TYPE_CHECKING:
    from .interface import BoardComposableObject

logger = logging.getLogger(__name__)


class IssueType(Enum):
    """Types of descriptor issues."""

    INVERTED_BOUNDING_BOX = "inverted_bounding_box"
    NEGATIVE_MARGIN = "negative_margin"
    ROUNDRECT_RATIO = "roundrect_ratio"
    DRILL_SIZE = "drill_size"
    DUPLICATE_PAD_NUMBER = "duplicate_pad_number"
    DUPLICATE_UUID = "duplicate_uuid"
    UNRENDERED_GRAPHIC = "unrendered_graphic"


@dataclass
class DescriptorIssue:
    """A detected issue with a component descriptor."""

    footprint_name: str
    issue_type: IssueType
    severity: Severity
    message: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.footprint_name}: {self.severity.value.upper()} - {self.message}"


class DescriptorValidator:
    """Validates component descriptors before export.

    Example::

        validator = DescriptorValidator()
        issues = validator.validate(component)
        for issue in issues:
            print(issue)

        validator.raise_for_issues(component)  # raises ValidationError on errors
    """

    def validate(self, component: BoardComposableObject) -> List[DescriptorIssue]:
        """Run all checks against ``component``.

        Returns:
            List of detected issues, errors and warnings mixed, in check order
        """
        name = component.footprint_name()
        issues: List[DescriptorIssue] = []
        issues.extend(self._check_geometry(component, name))
        issues.extend(self._check_pads(component, name))
        issues.extend(self._check_uuids(component, name))
        issues.extend(self._check_graphics(component, name))
        logger.debug(f"Validated {name}: {len(issues)} issue(s)")
        return issues

    def raise_for_issues(self, component: BoardComposableObject) -> List[DescriptorIssue]:
        """Validate and raise if any ERROR-level issue was found.

        Returns:
            The non-error issues (warnings and info)

        Raises:
            ValidationError: If at least one issue has ERROR severity
        """
        issues = self.validate(component)
        errors = [i for i in issues if i.severity is Severity.ERROR]
        if errors:
            raise ValidationError(
                [e.message for e in errors],
                context={"footprint": component.footprint_name()},
            )
        return issues

    def _check_geometry(self, component, name: str) -> List[DescriptorIssue]:
        issues = []
        bbox = component.bounding_box()
        if bbox.is_inverted:
            issues.append(
                DescriptorIssue(
                    footprint_name=name,
                    issue_type=IssueType.INVERTED_BOUNDING_BOX,
                    severity=Severity.ERROR,
                    message=(
                        f"Bounding box is inverted ({bbox.min_x}, {bbox.min_y}) -> "
                        f"({bbox.max_x}, {bbox.max_y})"
                    ),
                    details={"bounding_box": bbox},
                )
            )
        margin = component.courtyard_margin()
        if margin < 0:
            issues.append(
                DescriptorIssue(
                    footprint_name=name,
                    issue_type=IssueType.NEGATIVE_MARGIN,
                    severity=Severity.ERROR,
                    message=f"Courtyard margin is negative ({margin})",
                    details={"margin": margin},
                )
            )
        return issues

    def _check_pads(self, component, name: str) -> List[DescriptorIssue]:
        issues = []
        pads = component.pad_descriptors()

        for pad in pads:
            is_roundrect = pad.shape is PadShape.ROUNDRECT
            if is_roundrect and pad.roundrect_ratio is None:
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.ROUNDRECT_RATIO,
                        severity=Severity.WARNING,
                        message=f"Pad {pad.number} is roundrect but has no roundrect ratio",
                        details={"pad": pad.number},
                    )
                )
            elif not is_roundrect and pad.roundrect_ratio is not None:
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.ROUNDRECT_RATIO,
                        severity=Severity.ERROR,
                        message=(
                            f"Pad {pad.number} has a roundrect ratio but shape is {pad.shape.value}"
                        ),
                        details={"pad": pad.number, "shape": pad.shape.value},
                    )
                )

            if pad.pad_type is PadType.SMD and pad.drill_size is not None:
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.DRILL_SIZE,
                        severity=Severity.WARNING,
                        message=f"SMD pad {pad.number} has a drill size ({pad.drill_size})",
                        details={"pad": pad.number, "drill_size": pad.drill_size},
                    )
                )
            elif pad.pad_type.is_drilled and pad.drill_size is None:
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.DRILL_SIZE,
                        severity=Severity.WARNING,
                        message=f"{pad.pad_type.value} pad {pad.number} has no drill size",
                        details={"pad": pad.number},
                    )
                )

        counts = Counter(pad.number for pad in pads)
        for number, count in counts.items():
            if count > 1:
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.DUPLICATE_PAD_NUMBER,
                        severity=Severity.WARNING,
                        message=f"Pad number {number} is used {count} times",
                        details={"pad": number, "count": count},
                    )
                )
        return issues

    def _check_uuids(self, component, name: str) -> List[DescriptorIssue]:
        tokens = [t.uuid for t in component.fp_text_elements()]
        tokens += [g.uuid for g in component.graphic_elements()]
        tokens += [g.uuid for g in component.generate_courtyard().to_graphic_elements()]
        tokens += [p.uuid for p in component.pad_descriptors()]

        issues = []
        for token, count in Counter(tokens).items():
            if count > 1:
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.DUPLICATE_UUID,
                        severity=Severity.ERROR,
                        message=f"Identity token {token} is used by {count} elements",
                        details={"uuid": token, "count": count},
                    )
                )
        return issues

    def _check_graphics(self, component, name: str) -> List[DescriptorIssue]:
        issues = []
        for graphic in component.graphic_elements():
            if not isinstance(graphic, GraphicLine):
                kind = type(graphic).__name__
                issues.append(
                    DescriptorIssue(
                        footprint_name=name,
                        issue_type=IssueType.UNRENDERED_GRAPHIC,
                        severity=Severity.INFO,
                        message=f"{kind} on {graphic.layer.value} is not written to the footprint",
                        details={"uuid": graphic.uuid, "kind": kind},
                    )
                )
        return issues


def validate_component(
    component: BoardComposableObject, strict: bool = False
) -> List[DescriptorIssue]:
    """Validate a component with the default validator.

    Args:
        component: Component to check
        strict: Raise ValidationError if any ERROR-level issue is found

    Returns:
        List of issues (only non-errors when ``strict`` is set)
    """
    validator = DescriptorValidator()
    if strict:
        return validator.raise_for_issues(component)
    return validator.validate(component)
