import asyncio
import logging
import sys

from dal.context import shutdown, startup

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


async def main() -> int:
    """Create missing tables, seed default settings and print the outcome."""
    ctx = await startup()
    try:
        report = ctx.report
        print(f"--- Schema initialization ({ctx.config.describe()}) ---")
        for outcome in report.tables:
            line = f"{outcome.name}: {outcome.status}"
            if outcome.error:
                line += f" ({outcome.error})"
            print(line)
        print(f"organization_settings seed: {report.seed}")
        print("Done." if report.ok else "Finished with errors.")
        return 0 if report.ok else 1
    finally:
        await shutdown(ctx)


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
