from __future__ import annotations

from typing import Optional, Sequence

from models.hole_record import HoleRecord
from models.round_summary import RoundHistoryEntry
from scoring.stableford import stableford_per_hole

from .stats import score_progression


def _load_plt():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualizations. Install it with: pip install matplotlib"
        ) from exc
    return plt


def _progression_labels(rows: Sequence[dict]) -> list[str]:
    labels: list[str] = []
    for row in rows:
        if row["date"] is not None:
            labels.append(row["date"].strftime("%Y-%m-%d"))
        else:
            labels.append(f"R{row['round_index']}")
    return labels


def _apply_sparse_xticks(ax, labels: Sequence[str], max_labels: int = 12) -> None:
    """
    Keep x-axis readable when there are many rounds.

    Shows at most `max_labels` ticks while preserving order.
    """
    count = len(labels)
    if count <= max_labels:
        ax.set_xticks(range(count))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        return

    step = max(1, count // max_labels)
    tick_positions = list(range(0, count, step))
    if tick_positions[-1] != count - 1:
        tick_positions.append(count - 1)

    ax.set_xticks(tick_positions)
    ax.set_xticklabels([labels[i] for i in tick_positions], rotation=45, ha="right")


def plot_score_progression(
    rounds: Sequence[RoundHistoryEntry],
    mode: str = "stroke",
    score_type: str = "gross",
    handicap_index: Optional[float] = None,
):
    """
    Line chart of a golfer's rounds over time.

    Stroke mode plots total score; Stableford mode plots points. Rounds
    without a value for the chosen mode are left as gaps.
    """
    plt = _load_plt()
    rows = score_progression(rounds, mode=mode, score_type=score_type)
    key = "points" if mode == "stableford" else "score"
    x = list(range(len(rows)))
    values = [row[key] if row[key] is not None else float("nan") for row in rows]

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(x, values, marker="o", color="#10B981" if mode == "stableford" else "#6366F1")
    title = "Stableford Points" if mode == "stableford" else "Score"
    ax.set_title(f"{title} Progression ({score_type.title()})")
    ax.set_xlabel("Round")
    ax.set_ylabel("Stableford Points" if mode == "stableford" else "Total Score")
    if mode == "stableford":
        # 36 points is playing to handicap
        ax.axhline(36, color="black", linewidth=1, alpha=0.4)
    if handicap_index is not None:
        ax.text(
            0.01, 0.97, f"Handicap index {handicap_index:.1f}",
            transform=ax.transAxes, va="top", fontsize=9,
        )
    _apply_sparse_xticks(ax, _progression_labels(rows))
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax


def plot_stableford_per_hole(
    scores: Sequence[HoleRecord], course_handicap: Optional[float] = None
):
    """Grouped bar chart: gross vs net Stableford points on each hole."""
    plt = _load_plt()
    points = stableford_per_hole(scores, course_handicap)
    holes = [s.hole_number for s in scores]
    x = list(range(len(holes)))
    width = 0.4

    fig, ax = plt.subplots(figsize=(11, 5))
    ax.bar([i - width / 2 for i in x], [p.gross for p in points], width, label="Gross")
    ax.bar([i + width / 2 for i in x], [p.net for p in points], width, label="Net")
    ax.set_title("Stableford Points Per Hole")
    ax.set_xlabel("Hole")
    ax.set_ylabel("Points")
    ax.set_xticks(x)
    ax.set_xticklabels([str(h) for h in holes])
    ax.set_ylim(0, 5.5)
    ax.legend(loc="upper right")
    ax.grid(axis="y", alpha=0.2)
    fig.tight_layout()
    return fig, ax
