from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from analytics.visualizations import plot_score_progression
from database.connection import DatabasePool
from database.db_manager import DatabaseManager
from models import Golfer, RoundHistoryEntry

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate score progression charts for a golfer from PostgreSQL data."
    )
    parser.add_argument("--golfer-id", required=True, help="Profile id in public.profiles")
    parser.add_argument(
        "--outdir",
        default="analytics/output",
        help="Directory where chart PNGs are written",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=200,
        help="Max rounds to load for the golfer",
    )
    parser.add_argument(
        "--dsn",
        default=None,
        help="Optional PostgreSQL DSN. If omitted, uses connection defaults.",
    )
    return parser.parse_args()


def _has_stableford_data(rounds: List[RoundHistoryEntry], score_type: str) -> bool:
    attr = "stableford_gross" if score_type == "gross" else "stableford_net"
    return any(getattr(r, attr) is not None for r in rounds)


def _has_net_data(rounds: List[RoundHistoryEntry]) -> bool:
    return any(r.net_score is not None for r in rounds)


async def _load_history(
    golfer_id: str, dsn: Optional[str], limit: int
) -> tuple[Golfer, List[RoundHistoryEntry]]:
    pool = DatabasePool()
    await pool.initialize(dsn=dsn)
    db = DatabaseManager(pool.pool)
    try:
        golfer = await db.profiles.get_golfer(golfer_id)
        if not golfer:
            raise RuntimeError(f"No golfer found for id: {golfer_id}")
        rounds = await db.rounds.get_round_history(golfer_id, limit=limit)
        if not rounds:
            raise RuntimeError(f"No rounds found for golfer: {golfer_id}")
        return golfer, rounds
    finally:
        await pool.close()


async def main_async() -> None:
    args = _parse_args()
    golfer, rounds = await _load_history(args.golfer_id, args.dsn, args.limit)

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    charts = [("stroke", "gross")]
    if _has_net_data(rounds):
        charts.append(("stroke", "net"))
    for score_type in ("gross", "net"):
        if _has_stableford_data(rounds, score_type):
            charts.append(("stableford", score_type))
        else:
            logger.info("Skipping %s Stableford chart: no points stored", score_type)

    written: list[Path] = []
    for mode, score_type in charts:
        fig, _ = plot_score_progression(
            rounds, mode=mode, score_type=score_type,
            handicap_index=golfer.handicap_index,
        )
        path = outdir / f"{mode}_{score_type}_progression.png"
        fig.savefig(path, dpi=150)
        written.append(path)

    print(f"Generated {len(written)} chart(s) for {golfer.display_name or golfer.id}:")
    for path in written:
        print(path.resolve())


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
