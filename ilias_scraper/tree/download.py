"""Write remote trees, files and link shortcuts to disk."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import httpx
from tqdm import tqdm


async def download_tree(node, client: httpx.AsyncClient, path, options) -> None:
    """Mirror ``node`` below ``path``, creating folders and fetching files.

    Download errors of single files are reported and do not stop the run.
    """
    path = Path(path)
    if node.is_container():
        deeper = path / node.name
        deeper.mkdir(parents=True, exist_ok=True)
        for child in node.children:
            await download_tree(child, client, deeper, options)
    elif node.should_download(options):
        try:
            await node.download_node(client, path)
        except (httpx.HTTPError, OSError, ValueError) as err:
            print(f"Error downloading file: {err!r}")


def save_link(link: str, name: str, path) -> Path:
    """Write an internet shortcut named ``name`` pointing at ``link``."""
    file_loc = Path(path) / f"{name}.url"
    file_loc.write_text(f"[InternetShortcut]\nURL={link}", encoding="utf-8")
    return file_loc


async def request_file(client: httpx.AsyncClient, url: str) -> httpx.Response:
    """Open a streamed GET request, following ``location`` headers by hand.

    The caller must close the returned response.
    """
    response = await client.send(client.build_request("GET", url), stream=True)
    while "location" in response.headers:
        location = response.headers["location"]
        await response.aclose()
        response = await client.send(client.build_request("GET", location), stream=True)
    return response


def file_name_with_extension(file_path, headers: Mapping[str, str]) -> Path | None:
    """Append the extension named in the content disposition, if missing."""
    disposition = headers.get("content-disposition")
    if disposition is None:
        return None
    extension = "." + disposition.split(".")[-1].split('"')[0]
    text = str(file_path)
    if text.endswith(extension):
        return Path(text)
    return Path(text + extension)


async def download_file(client: httpx.AsyncClient, url: str, filename: str, path) -> Path:
    """Download ``url`` into ``path`` as ``filename`` and return the file written."""
    file_loc = Path(path) / filename
    response = await request_file(client, url)
    try:
        length = response.headers.get("content-length")
        total = int(length) if length is not None and length.isdigit() else None

        target = file_name_with_extension(file_loc, response.headers)
        if target is None:
            raise ValueError("Could not parse file name from response.")

        with target.open("wb") as file, tqdm(
            total=total, unit="B", unit_scale=True, desc="Downloading"
        ) as bar:
            async for chunk in response.aiter_bytes():
                file.write(chunk)
                bar.update(len(chunk))
    finally:
        await response.aclose()

    print()
    return target