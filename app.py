"""Entry point for the Task List API."""

import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from task_list.api.main import app  # noqa: E402

if __name__ == "__main__":
    import uvicorn

    from task_list.config import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
