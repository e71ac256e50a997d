#!/usr/bin/env python3
"""Start the depclash web API."""

import uvicorn


def main(host: str = "0.0.0.0", port: int = 8000, reload: bool = True) -> None:
    """Serve apps.web.main:app with uvicorn."""
    print("🚀 Starting depclash API...")
    print(f"📍 URL: http://localhost:{port}")
    print(f"📄 API docs: http://localhost:{port}/docs")
    print("🛑 Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "apps.web.main:app",
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["apps", "depclash"] if reload else None,
    )


if __name__ == "__main__":
    main()
