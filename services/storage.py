from typing import Callable, Sequence
from urllib.parse import urlparse

from azure.storage.blob import BlobServiceClient

from models.chunked import ChunkedByteReader
from services.chunks import total_length

Logger = Callable[[str], None]


def parse_blob_components(blob_url: str) -> tuple[str, str]:
    """Extract container and blob name from a full https blob URL."""
    parts = urlparse(blob_url).path.strip("/").split("/")
    if len(parts) < 2 or not all(parts[:2]):
        raise ValueError("Invalid blob URL path; cannot parse container/blob name")
    return parts[0], "/".join(parts[1:])


def upload_chunks(
    connection_string: str | None,
    blob_url: str,
    chunks: Sequence[bytes],
    *,
    max_concurrency: int = 4,
    overwrite: bool = True,
    log: Logger | None = None,
) -> int:
    """Upload a chunk list as one blob, streaming it through a ChunkedByteReader.

    Returns the number of bytes uploaded.
    """
    if not connection_string:
        raise ValueError("Azure Storage connection string is required for uploads")

    container, blob_name = parse_blob_components(blob_url)
    length = total_length(chunks)

    bsc = BlobServiceClient.from_connection_string(connection_string)
    blob_client = bsc.get_blob_client(container=container, blob=blob_name)
    if log:
        log(f"Uploading {length} bytes in {len(chunks)} chunks to '{container}/{blob_name}'")

    with ChunkedByteReader(chunks) as stream:
        try:
            blob_client.upload_blob(
                stream,
                length=length,
                overwrite=overwrite,
                max_concurrency=max_concurrency,
            )
        except Exception as e:
            if log:
                log(f"Upload of '{container}/{blob_name}' failed: {e}")
            raise

    if log:
        log(f"Uploaded '{container}/{blob_name}'")
    return length
