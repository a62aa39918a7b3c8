"""FastAPI server for previewing the generated gallery."""

from collections.abc import Sequence
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.routing import Mount
from fastapi.staticfiles import StaticFiles

from .filtering import DEFAULT_TAG_ORDER
from .gallery import GALLERY_FILENAME, generate_gallery

SITE_MOUNT = "site"

app = FastAPI(title="Project Gallery")


@app.get("/")
async def index():
    """Serve the gallery HTML, optionally regenerating first."""
    if not hasattr(app.state, 'site_dir'):
        raise HTTPException(500, "Server not configured")
    if getattr(app.state, 'regenerate', False):
        generate_gallery(app.state.data_path, app.state.site_dir, tag_order=app.state.tag_order)
    gallery_path = app.state.site_dir / GALLERY_FILENAME
    if not gallery_path.exists():
        raise HTTPException(404, "Gallery not found")
    return FileResponse(gallery_path)


def _mount_site(site_dir: Path) -> None:
    """Mount site_dir for media and data files, replacing any earlier site mount."""
    if getattr(app.state, 'mounted_dir', None) == site_dir:
        return

    # Drop the previous mount when the app is pointed at another directory
    app.router.routes[:] = [
        route for route in app.router.routes
        if not (isinstance(route, Mount) and route.name == SITE_MOUNT)
    ]
    # Mount static files for the site (must be after the index route)
    app.mount("/", StaticFiles(directory=site_dir), name=SITE_MOUNT)
    app.state.mounted_dir = site_dir


def create_app(
    site_dir: Path,
    data_path: Path,
    regenerate: bool = False,
    tag_order: Sequence[str] = DEFAULT_TAG_ORDER,
) -> FastAPI:
    """Point the app at a site directory and its source document."""
    app.state.site_dir = site_dir.resolve()
    app.state.data_path = data_path.resolve()
    app.state.regenerate = regenerate
    app.state.tag_order = tuple(tag_order)
    _mount_site(app.state.site_dir)
    return app


def run_server(
    site_dir: Path,
    data_path: Path,
    host: str = "127.0.0.1",
    port: int = 8000,
    regenerate: bool = False,
    tag_order: Sequence[str] = DEFAULT_TAG_ORDER,
):
    """Run the server."""
    import uvicorn

    create_app(site_dir, data_path, regenerate, tag_order)

    print(f"Serving gallery at http://{host}:{port}")
    if regenerate:
        print("Gallery will regenerate on each page load")
    uvicorn.run(app, host=host, port=port)
