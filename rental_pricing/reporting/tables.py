from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..pricing.summary import format_duration_for_pricing, get_pricing_summary
from ..pricing.types import Number, PricingBreakdown


def _md_escape(v: object) -> str:
    s = "" if v is None else str(v)
    # Escape pipes so Markdown tables don't break
    return s.replace("|", "\\|").replace("\n", " ").strip()


def _credits(v: Number) -> str:
    if isinstance(v, float) and not v.is_integer():
        return f"{v:,.2f} cr"
    return f"{int(v):,} cr"


def render_breakdown_table(rows: Iterable[Tuple[str, PricingBreakdown]]) -> str:
    """Markdown table of labelled breakdowns (one row per priced duration)."""
    out: List[str] = [
        "| Duration | Hours | Mode | Days | Remainder | Total |",
        "|---|---:|---|---:|---:|---:|",
    ]
    for label, b in rows:
        days = "-" if b.full_days is None else str(b.full_days)
        remainder = f"{b.remainder_hours}h" if b.full_days is not None and b.remainder_hours else "-"
        out.append(
            "| {label} | {hours} | {mode} | {days} | {rem} | {total} |".format(
                label=_md_escape(label),
                hours=b.duration_hours,
                mode=b.pricing_mode.value,
                days=days,
                rem=remainder,
                total=_credits(b.total_credits),
            )
        )
    return "\n".join(out)


def render_quote(breakdown: PricingBreakdown, duration_minutes: Optional[Number] = None) -> str:
    lines: List[str] = []
    if duration_minutes is not None:
        lines.append(f"**Duration:** {format_duration_for_pricing(duration_minutes)}")
    lines.append(f"**Billed as:** {get_pricing_summary(breakdown)} ({breakdown.pricing_mode.value})")
    lines.append(f"**Rate:** {_credits(breakdown.hourly_rate)}/hr, {_credits(breakdown.day_rate)}/day")
    lines.append(f"**Breakdown:** {_md_escape(breakdown.breakdown_text)}")
    lines.append(f"**Total:** {_credits(breakdown.total_credits)}")
    return "\n".join(lines)


__all__ = ["render_breakdown_table", "render_quote"]
