import sys, pathlib, asyncio
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from sqlalchemy import text
from app.core.db import engine
from app.models import Base

async def main():
    async with engine.begin() as conn:
        # Simple ping
        one = await conn.execute(text("SELECT 1"))
        print("db-ping:", one.scalar())

        # Creates missing tables only; existing ones are left untouched
        await conn.run_sync(Base.metadata.create_all)
        print("tables:", ", ".join(sorted(Base.metadata.tables)))

    await engine.dispose()

asyncio.run(main())
