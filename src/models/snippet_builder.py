from __future__ import annotations

import logging

from models.block_spec import BlockSpec, FormState, format_number

__all__ = [
    "DEFAULT_HARVEST_LEVEL",
    "DEFAULT_LIGHT_LEVEL",
    "DEFAULT_LIGHT_OPACITY",
    "DEFAULT_SLIPPERINESS",
    "build_declaration",
    "build_hardness_clause",
    "build_advanced_clauses",
    "build_unbreakable_clause",
    "build_register_clause",
    "build_snippet",
    "generate_snippet",
]

_LOGGER = logging.getLogger("block_helper.snippet_builder")

DEFAULT_HARVEST_LEVEL = 0
DEFAULT_LIGHT_LEVEL = 0
DEFAULT_LIGHT_OPACITY = 0
DEFAULT_SLIPPERINESS = 0.6


def build_declaration(block_id: str, material: str) -> str:
    return f'val {block_id} = GenericBlock.createPillar(<blockmaterial:{material}>, "{block_id}");\n'


def build_hardness_clause(
    block_id: str,
    use_strength: bool,
    hardness: float | None,
    resistance: float | None,
    hardness_only: float | None,
    strict: bool = False,
) -> str:
    """Return the strength *or* the hardness statement, never both.

    In strength mode the missing half of the pair is written as ``0``; with
    neither value present nothing is emitted. Outside strength mode a parsed
    hardness is emitted as-is, or only when positive if *strict* is set.
    """
    if use_strength:
        if hardness is None and resistance is None:
            return ""
        return (
            f"{block_id}.setStrength({format_number(hardness or 0)}, {format_number(resistance or 0)});"
            " // Set hardness and blast resistance\n"
        )
    if hardness_only is None:
        return ""
    if strict and hardness_only <= 0:
        return ""
    return f"{block_id}.setHardness({format_number(hardness_only)}); // Set hardness\n"


def build_advanced_clauses(
    block_id: str,
    harvest_level: int | None,
    light_level: int | None,
    light_opacity: int | None,
    slipperiness: float | None,
) -> str:
    """One setter per property that is present and differs from its default."""
    lines: list[str] = []
    if harvest_level is not None and harvest_level != DEFAULT_HARVEST_LEVEL:
        lines.append(f"{block_id}.setHarvestLevel({harvest_level}); // Harvest level")
    if light_level is not None and light_level != DEFAULT_LIGHT_LEVEL:
        lines.append(f"{block_id}.setLightLevel({light_level}); // Light emission (0-15)")
    if light_opacity is not None and light_opacity != DEFAULT_LIGHT_OPACITY:
        lines.append(f"{block_id}.setLightOpacity({light_opacity}); // Light opacity (0-255)")
    if slipperiness is not None and slipperiness != DEFAULT_SLIPPERINESS:
        lines.append(f"{block_id}.setSlipperiness({format_number(slipperiness)}); // Slipperiness (0-1)")
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def build_unbreakable_clause(block_id: str, flag: bool) -> str:
    if not flag:
        return ""
    return f"{block_id}.setUnbreakable(); // Block cannot be broken\n"


def build_register_clause(block_id: str) -> str:
    return f"{block_id}.register(); // Register block\n"


def build_snippet(spec: BlockSpec, strict_hardness: bool = False) -> str:
    """Assemble the full script for *spec*.

    Clause order is fixed: declaration, hardness, unbreakable, advanced
    properties, register.
    """
    parts = [
        build_declaration(spec.id, spec.material),
        build_hardness_clause(
            spec.id,
            spec.use_strength,
            spec.hardness,
            spec.resistance,
            spec.hardness_only,
            strict=strict_hardness,
        ),
        build_unbreakable_clause(spec.id, spec.unbreakable),
        build_advanced_clauses(
            spec.id,
            spec.harvest_level,
            spec.light_level,
            spec.light_opacity,
            spec.slipperiness,
        ),
        build_register_clause(spec.id),
    ]
    snippet = "".join(parts)
    line_count = snippet.count("\n")
    _LOGGER.debug(f"Built snippet for '{spec.id}' ({line_count} lines).")
    return snippet


def generate_snippet(state: FormState, strict_hardness: bool = False) -> str:
    """Validate *state* and build its script.

    Raises:
        ValidationError: before anything is built, if the identifier is unusable.
    """
    spec = BlockSpec.from_form(state)
    return build_snippet(spec, strict_hardness=strict_hardness)
