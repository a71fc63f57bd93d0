import os
import tempfile

import pytest

# Point the app at a throwaway database and upload dir before eventwall is imported
_TMP_DIR = tempfile.mkdtemp(prefix="eventwall-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR}/test.sqlite3"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")
os.environ["API_KEY"] = ""


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    from eventwall.config import settings
    settings.api_key = ""

    from eventwall.database import create_tables, async_session
    from eventwall.seed import seed_data

    async def _setup():
        await create_tables()
        async with async_session() as session:
            await seed_data(session)

    asyncio.run(_setup())
