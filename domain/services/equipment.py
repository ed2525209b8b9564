"""
Equipment availability and matching.

A gym location registers equipment by canonical id (``dumbbells``,
``cable_machine``). Catalog exercises name their equipment free-form
(``dumbbell``, ``cable``), so the registered ids are expanded through a
synonym table before matching.
"""

from typing import Dict, FrozenSet, Iterable, List, Set

EQUIPMENT_SYNONYMS: Dict[str, List[str]] = {
    # Machines
    "leg_press": ["leg press", "machine"],
    "leg_extension": ["leg extension", "machine"],
    "leg_curl": ["leg curl", "machine"],
    "hack_squat": ["hack squat", "machine"],
    "smith_machine": ["smith machine", "smith"],
    "chest_press": ["chest press machine", "machine"],
    "pec_deck": ["pec deck", "fly machine", "machine"],
    "shoulder_press_machine": ["shoulder press machine", "machine"],
    "lat_pulldown": ["lat pulldown", "cable"],
    "seated_row": ["seated row", "cable row", "machine"],
    "cable_machine": ["cable", "pulley"],
    "assisted_dip": ["assisted"],
    "preacher_curl": ["preacher"],
    "calf_raise": ["calf raise machine", "machine"],
    "hip_abductor": ["hip abductor", "hip adductor", "machine"],
    "glute_kickback": ["glute kickback", "cable"],
    "reverse_hyper": ["reverse hyper"],
    # Free weights
    "barbell": ["barbell", "bar"],
    "dumbbells": ["dumbbell", "db"],
    "kettlebells": ["kettlebell", "kb"],
    "ez_bar": ["ez bar", "ez curl", "curl bar"],
    "trap_bar": ["trap bar", "hex bar"],
    # Benches and racks
    "flat_bench": ["flat bench", "bench"],
    "incline_bench": ["incline bench", "incline"],
    "decline_bench": ["decline bench", "decline"],
    "squat_rack": ["squat rack", "power rack", "rack"],
    "dip_station": ["dip", "parallel bars"],
    "pull_up_bar": ["pull-up", "pullup", "chin-up", "chinup"],
    # Other
    "resistance_bands": ["band", "resistance band"],
    "trx": ["trx", "suspension"],
    "ab_wheel": ["ab wheel", "rollout"],
    "medicine_ball": ["medicine ball", "med ball"],
    "battle_ropes": ["battle ropes", "rope"],
    "landmine": ["landmine"],
}

BODYWEIGHT = "bodyweight"

DEFAULT_EQUIPMENT: FrozenSet[str] = frozenset(
    {"barbell", "dumbbell", "cable", "machine", "bodyweight"}
)


def _normalize(term: str) -> str:
    return term.strip().lower()


def expand_equipment(names: Iterable[str]) -> Set[str]:
    """
    Expand registered equipment into the availability set.

    Every name is kept lower-cased and, when it is a known canonical id,
    joined by its synonyms. Bodyweight is always available.

    Args:
        names: Registered equipment ids or display names

    Returns:
        Availability set; the default set when nothing is registered
    """
    available: Set[str] = set()
    for name in names:
        if not name:
            continue
        key = _normalize(name)
        available.add(key)
        for synonym in EQUIPMENT_SYNONYMS.get(key, []):
            available.add(synonym)

    if not available:
        return set(DEFAULT_EQUIPMENT)
    available.add(BODYWEIGHT)
    return available


def canonical_equipment_ids(term: str) -> Set[str]:
    """
    Resolve a free-form equipment term to canonical ids.

    Only exact matches against an id or one of its synonyms count. A term
    nothing resolves is its own canonical id.
    """
    key = _normalize(term)
    ids = {
        canonical
        for canonical, synonyms in EQUIPMENT_SYNONYMS.items()
        if key == canonical or key in synonyms
    }
    return ids or {key}


def equipment_matches(
    required: Iterable[str],
    available: Iterable[str],
    strict: bool = False,
) -> bool:
    """
    Check whether an exercise's equipment is covered by what is available.

    Required entries are alternatives: one match is enough. An empty
    requirement always passes.

    Fuzzy mode (the default) accepts an exact case-insensitive match or a
    substring match in either direction. Strict mode compares canonical
    ids instead, so "cable" no longer matches "cable row machine".

    Args:
        required: Equipment the exercise lists
        available: Expanded availability set
        strict: Use canonical-id matching instead of substring matching

    Returns:
        True if the exercise can be performed
    """
    wanted = [_normalize(r) for r in required if r and r.strip()]
    if not wanted:
        return True

    have = [_normalize(a) for a in available if a and a.strip()]

    if strict:
        have_ids: Set[str] = set()
        for term in have:
            have_ids |= canonical_equipment_ids(term)
        return any(canonical_equipment_ids(term) & have_ids for term in wanted)

    for term in wanted:
        for candidate in have:
            if term == candidate or candidate in term or term in candidate:
                return True
    return False
