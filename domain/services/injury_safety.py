"""
Capability-based injury safety classifier.

Each active injury resolves to an injury type describing which muscles it
affects, which spinal movements and loading it restricts, and which body
positions aggravate it. An exercise is checked against every active injury
using its capability attributes and classified as safe, caution or avoid.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from domain.models import (
    ActiveInjury,
    Exercise,
    InjurySeverity,
    MuscleGroup,
    SafetyLevel,
    SpinalLoading,
    parse_muscle,
)

logger = logging.getLogger(__name__)

_LOADING_ORDER = [SpinalLoading.NONE, SpinalLoading.LOW, SpinalLoading.MODERATE, SpinalLoading.HIGH]

_LOADING_REASON_SEVERITY = {
    SpinalLoading.NONE: "low",
    SpinalLoading.LOW: "low",
    SpinalLoading.MODERATE: "medium",
    SpinalLoading.HIGH: "high",
}

_AREA_NAMES = {
    "lower_back": "lower back",
    "upper_back": "upper back",
}


@dataclass(frozen=True)
class InjuryType:
    """
    Static description of an injury and the movements it restricts.

    ``restricted_loading`` is the lowest spinal loading level that is no
    longer allowed; None means spinal loading is unrestricted.
    """

    id: str
    name: str
    affected_areas: Tuple[MuscleGroup, ...] = ()
    restricted_loading: Optional[SpinalLoading] = None
    avoid_back_arch: bool = False
    avoid_spinal_flexion: bool = False
    avoid_spinal_extension: bool = False
    avoid_spinal_rotation: bool = False
    avoid_position_stress: FrozenSet[str] = frozenset()
    default_severity: InjurySeverity = InjurySeverity.MODERATE


@dataclass(frozen=True)
class SafetyReason:
    """One finding against an exercise; severity is high, medium or low."""

    kind: str
    description: str
    severity: str


@dataclass
class SafetyAssessment:
    """Verdict for one exercise against the active injuries."""

    level: SafetyLevel
    reasons: List[SafetyReason] = field(default_factory=list)

    @property
    def is_caution(self) -> bool:
        return self.level == SafetyLevel.CAUTION


SafetyClassifier = Callable[[Exercise, Sequence[ActiveInjury]], SafetyAssessment]


def _injury(
    id: str,
    name: str,
    areas: Iterable[MuscleGroup] = (),
    stress: Iterable[str] = (),
    severity: InjurySeverity = InjurySeverity.MODERATE,
    **restrictions,
) -> InjuryType:
    return InjuryType(
        id=id,
        name=name,
        affected_areas=tuple(areas),
        avoid_position_stress=frozenset(stress),
        default_severity=severity,
        **restrictions,
    )


_M = MuscleGroup
_MILD = InjurySeverity.MILD
_SEVERE = InjurySeverity.SEVERE

INJURY_TYPES: Dict[str, InjuryType] = {
    t.id: t
    for t in [
        # Back
        _injury(
            "lower_back_strain", "Lower Back Strain", [_M.BACK], ["lower_back"],
            restricted_loading=SpinalLoading.MODERATE,
            avoid_spinal_extension=True, avoid_back_arch=True,
        ),
        _injury(
            "herniated_disc", "Herniated Disc", [_M.BACK], ["lower_back", "upper_back"], _SEVERE,
            restricted_loading=SpinalLoading.MODERATE,
            avoid_spinal_flexion=True, avoid_spinal_extension=True,
            avoid_spinal_rotation=True, avoid_back_arch=True,
        ),
        _injury(
            "sciatica", "Sciatica", [_M.BACK, _M.GLUTES, _M.HAMSTRINGS], ["lower_back"],
            restricted_loading=SpinalLoading.HIGH, avoid_spinal_flexion=True,
        ),
        _injury("upper_back_strain", "Upper Back Strain", [_M.BACK], ["upper_back"], _MILD),
        # Shoulder
        _injury("shoulder_impingement", "Shoulder Impingement", [_M.SHOULDERS], ["shoulders"]),
        _injury("rotator_cuff_strain", "Rotator Cuff Strain", [_M.SHOULDERS], ["shoulders"]),
        _injury("shoulder_instability", "Shoulder Instability", [_M.SHOULDERS], ["shoulders"]),
        # Knee
        _injury("knee_injury", "Knee Injury", [_M.QUADS, _M.HAMSTRINGS], ["knees"]),
        _injury("patellofemoral", "Patellofemoral Syndrome", [_M.QUADS], ["knees"], _MILD),
        _injury("meniscus_tear", "Meniscus Tear", [_M.QUADS, _M.HAMSTRINGS], ["knees"]),
        _injury("acl_injury", "ACL Injury", [_M.QUADS, _M.HAMSTRINGS], ["knees"], _SEVERE),
        # Arm
        _injury("elbow_tendinitis", "Elbow Tendinitis", [_M.BICEPS, _M.TRICEPS], ["elbows"]),
        _injury("wrist_strain", "Wrist Strain", [], ["wrists"], _MILD),
        _injury("carpal_tunnel", "Carpal Tunnel Syndrome", [], ["wrists"]),
        # Hip
        _injury("hip_flexor_strain", "Hip Flexor Strain", [_M.QUADS, _M.GLUTES], ["hips"]),
        _injury("hip_impingement", "Hip Impingement", [_M.GLUTES, _M.QUADS], ["hips"]),
        _injury("hip_bursitis", "Hip Bursitis", [_M.GLUTES], ["hips"]),
        # Neck
        _injury("neck_strain", "Neck Strain", [], ["neck"]),
        _injury(
            "cervical_disc", "Cervical Disc Issue", [], ["neck", "upper_back"], _SEVERE,
            avoid_spinal_extension=True,
        ),
        # Ankle
        _injury("ankle_sprain", "Ankle Sprain", [_M.CALVES], []),
    ]
}

# Body regions offered by the pre-workout check-in
REGION_INJURY_TYPES: Dict[str, str] = {
    "lower_back": "lower_back_strain",
    "upper_back": "upper_back_strain",
    "neck": "neck_strain",
    "shoulder": "shoulder_impingement",
    "shoulders": "shoulder_impingement",
    "elbow": "elbow_tendinitis",
    "elbows": "elbow_tendinitis",
    "wrist": "wrist_strain",
    "wrists": "wrist_strain",
    "hip": "hip_flexor_strain",
    "hips": "hip_flexor_strain",
    "knee": "knee_injury",
    "knees": "knee_injury",
    "ankle": "ankle_sprain",
    "ankles": "ankle_sprain",
}


def strip_side(region: str) -> str:
    """shoulder_left -> shoulder."""
    for suffix in ("_left", "_right"):
        if region.endswith(suffix):
            return region[: -len(suffix)]
    return region


def resolve_injury_type(region: str) -> Optional[InjuryType]:
    """
    Resolve an injury region to an injury type.

    Accepts an injury type id, a check-in body region, or a muscle group.
    A muscle group becomes an ad-hoc type whose only affected area is that
    muscle.
    """
    key = strip_side(region.strip().lower())
    if key in INJURY_TYPES:
        return INJURY_TYPES[key]
    if key in REGION_INJURY_TYPES:
        return INJURY_TYPES[REGION_INJURY_TYPES[key]]
    muscle = parse_muscle(key)
    if muscle is not None:
        return InjuryType(
            id=muscle.value,
            name=f"{muscle.value} injury",
            affected_areas=(muscle,),
        )
    return None


def _escalate(injury: ActiveInjury, normal: str, severe: str) -> str:
    return severe if injury.severity == InjurySeverity.SEVERE else normal


def _check_injury(exercise: Exercise, injury: ActiveInjury, injury_type: InjuryType) -> List[SafetyReason]:
    reasons: List[SafetyReason] = []

    if injury_type.id in exercise.contraindications:
        reasons.append(
            SafetyReason(
                "contraindication",
                f"Exercise is contraindicated for {injury_type.name}",
                "high",
            )
        )

    if injury_type.restricted_loading is not None:
        loading = exercise.spinal_loading
        if _LOADING_ORDER.index(loading) >= _LOADING_ORDER.index(injury_type.restricted_loading):
            reasons.append(
                SafetyReason(
                    "spinal_loading",
                    f"{loading.value.capitalize()} spinal loading may aggravate your injury",
                    _escalate(injury, _LOADING_REASON_SEVERITY[loading], "high"),
                )
            )

    movement_checks = [
        (injury_type.avoid_back_arch, exercise.requires_back_arch,
         "Requires back arch which stresses your injured area"),
        (injury_type.avoid_spinal_flexion, exercise.requires_spinal_flexion,
         "Requires spinal flexion which may aggravate your injury"),
        (injury_type.avoid_spinal_extension, exercise.requires_spinal_extension,
         "Requires spinal extension which may aggravate your injury"),
        (injury_type.avoid_spinal_rotation, exercise.requires_spinal_rotation,
         "Requires spinal rotation which may aggravate your injury"),
    ]
    for restricted, required, description in movement_checks:
        if restricted and required:
            reasons.append(
                SafetyReason("movement_requirement", description, _escalate(injury, "medium", "high"))
            )

    for area in sorted(injury_type.avoid_position_stress):
        if area in exercise.position_stress:
            reasons.append(
                SafetyReason(
                    "position_stress",
                    f"Stresses the {_AREA_NAMES.get(area, area)} which is affected by your {injury_type.name}",
                    _escalate(injury, "medium", "high"),
                )
            )

    for area in injury_type.affected_areas:
        if area == exercise.primary_muscle:
            reasons.append(
                SafetyReason(
                    "primary_muscle",
                    f"Directly targets {area.value}, which is affected by your injury",
                    _escalate(injury, "medium", "high"),
                )
            )
        if area in exercise.stabilizers:
            reasons.append(
                SafetyReason(
                    "stabilizer",
                    f"Uses {area.value} as a stabilizer, which is part of your injured area",
                    _escalate(injury, "low", "medium"),
                )
            )
        if area in exercise.secondary_muscles:
            reasons.append(
                SafetyReason(
                    "secondary_muscle",
                    f"Works {area.value} as a secondary muscle, which is affected by your injury",
                    _escalate(injury, "low", "medium"),
                )
            )

    return reasons


def determine_safety_level(reasons: Sequence[SafetyReason], injuries: Sequence[ActiveInjury]) -> SafetyLevel:
    """
    Collapse findings into a verdict.

    Avoid on any contraindication or high-severity finding, or on more
    than one medium finding while a severe injury is active. Any other
    finding means caution.
    """
    if not reasons:
        return SafetyLevel.SAFE

    if any(r.kind == "contraindication" or r.severity == "high" for r in reasons):
        return SafetyLevel.AVOID

    any_severe = any(i.severity == InjurySeverity.SEVERE for i in injuries)
    medium_count = sum(1 for r in reasons if r.severity == "medium")
    if any_severe and medium_count > 1:
        return SafetyLevel.AVOID

    return SafetyLevel.CAUTION


def assess_exercise_safety(exercise: Exercise, injuries: Sequence[ActiveInjury]) -> SafetyAssessment:
    """
    Classify an exercise against the active injuries.

    Inactive injuries and regions that resolve to no injury type are
    ignored.

    Args:
        exercise: Catalog exercise to check
        injuries: The user's injuries

    Returns:
        SafetyAssessment with the verdict and the findings behind it
    """
    active = [i for i in injuries if i.is_active]
    reasons: List[SafetyReason] = []

    for injury in active:
        injury_type = resolve_injury_type(injury.region)
        if injury_type is None:
            logger.debug(f"Ignoring injury with unknown region: {injury.region}")
            continue
        reasons.extend(_check_injury(exercise, injury, injury_type))

    return SafetyAssessment(level=determine_safety_level(reasons, active), reasons=reasons)


def merge_injuries(*sources: Iterable[ActiveInjury]) -> List[ActiveInjury]:
    """
    Union injury lists, deduplicated by region.

    The first occurrence of a region keeps its identity; if a later one
    is more severe its severity is carried over. Inactive injuries are
    dropped.
    """
    merged: Dict[str, ActiveInjury] = {}
    for source in sources:
        for injury in source:
            if not injury.is_active:
                continue
            existing = merged.get(injury.region)
            if existing is None:
                merged[injury.region] = injury
            elif injury.severity.rank > existing.severity.rank:
                merged[injury.region] = existing.model_copy(update={"severity": injury.severity})
    return list(merged.values())
