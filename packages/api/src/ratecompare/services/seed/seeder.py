# This project was developed with assistance from AI tools.
"""Demo data seeding service.

Seeds the catalog with a handful of lenders and rate sheets so the quote
form returns results immediately after deployment.

Simulated for demonstration purposes -- not real financial data.
"""

import json
import logging
from datetime import UTC, datetime

from ratedb import DemoDataManifest, Lender, MortgageRate
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .fixtures import LENDERS, RATES, compute_config_hash

logger = logging.getLogger(__name__)


async def _check_manifest(session: AsyncSession) -> DemoDataManifest | None:
    """Check if demo data has been seeded."""
    result = await session.execute(
        select(DemoDataManifest).order_by(DemoDataManifest.id.desc()).limit(1)
    )
    return result.scalar_one_or_none()


async def _clear_demo_data(session: AsyncSession, manifest: DemoDataManifest) -> None:
    """Delete the lenders recorded in the manifest, their rates, and the manifest.

    Only lender ids captured at seed time are removed; lenders created
    through the admin API survive a forced re-seed.
    """
    summary = json.loads(manifest.summary) if manifest.summary else {}
    lender_ids = [i for i in summary.get("lender_ids", []) if i is not None]

    if lender_ids:
        await session.execute(delete(MortgageRate).where(MortgageRate.lender_id.in_(lender_ids)))
        await session.execute(delete(Lender).where(Lender.id.in_(lender_ids)))

    await session.execute(delete(DemoDataManifest))

    logger.info("Cleared existing demo data")


async def seed_demo_data(session: AsyncSession, force: bool = False) -> dict:
    """Seed demo lenders and rates. Returns summary dict.

    Args:
        session: Catalog DB session.
        force: If True, clear and re-seed even if already seeded.

    Returns:
        Summary dict; ``status`` is ``already_seeded`` when a manifest
        exists and ``force`` is False.
    """
    manifest = await _check_manifest(session)
    if manifest and not force:
        return {
            "status": "already_seeded",
            "seeded_at": manifest.seeded_at.isoformat(),
            "config_hash": manifest.config_hash,
        }

    if manifest and force:
        await _clear_demo_data(session, manifest)

    # 1. Lenders
    lender_records = []
    for l_data in LENDERS:
        lender = Lender(is_active=True, **l_data)
        session.add(lender)
        lender_records.append(lender)

    await session.flush()  # Get lender IDs
    lender_map = {lender.name: lender.id for lender in lender_records}

    # 2. Rates
    rate_count = 0
    for r_data in RATES:
        fields = {k: v for k, v in r_data.items() if k != "lender_ref"}
        session.add(MortgageRate(lender_id=lender_map[r_data["lender_ref"]], is_active=True, **fields))
        rate_count += 1

    # 3. Manifest
    config_hash = compute_config_hash()
    summary = {"lenders": len(lender_records), "rates": rate_count}
    recorded = {**summary, "lender_ids": [lender.id for lender in lender_records]}
    session.add(DemoDataManifest(config_hash=config_hash, summary=json.dumps(recorded)))

    await session.commit()

    logger.info("Demo data seeded: %s", summary)

    return {
        "status": "seeded",
        "seeded_at": datetime.now(UTC).isoformat(),
        "config_hash": config_hash,
        **summary,
    }


async def get_seed_status(session: AsyncSession) -> dict:
    """Check if demo data has been seeded."""
    manifest = await _check_manifest(session)
    if manifest is None:
        return {"seeded": False}
    return {
        "seeded": True,
        "seeded_at": manifest.seeded_at.isoformat(),
        "config_hash": manifest.config_hash,
        "summary": json.loads(manifest.summary) if manifest.summary else None,
    }
