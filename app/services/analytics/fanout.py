# ============================================================================
# Concurrent Section Fan-out
# ============================================================================
from typing import Any, Awaitable, Dict
import asyncio
import logging

from app.core.exceptions import PartialComputationFailure

logger = logging.getLogger(__name__)


async def _run_section(section: str, awaitable: Awaitable) -> Any:
    try:
        return await awaitable
    except PartialComputationFailure:
        raise
    except Exception as e:
        logger.error(f"Analytics section '{section}' failed: {e}")
        raise PartialComputationFailure(section, e) from e


async def gather_sections(sections: Dict[str, Awaitable]) -> Dict[str, Any]:
    """
    Await every section concurrently and key the results by section name.

    The first failure cancels the sections still running and is raised as
    PartialComputationFailure; no partial payload is ever returned.
    Cancellation of the caller propagates to every section.
    """
    tasks = {
        name: asyncio.ensure_future(_run_section(name, awaitable))
        for name, awaitable in sections.items()
    }
    try:
        results = await asyncio.gather(*tasks.values())
    except BaseException:
        for task in tasks.values():
            if not task.done():
                task.cancel()
        # Let cancelled sections unwind before the error leaves this frame
        await asyncio.gather(*tasks.values(), return_exceptions=True)
        raise
    return dict(zip(tasks.keys(), results))
