import argparse
import sys
import traceback

from config.settings import get_settings
from models.chunked import ChunkedByteReader
from models.csv_options import CsvOptions
from services.chunks import read_file_chunks, total_length
from services.storage import upload_chunks
from services.tabular import read_csv_chunks


def log(msg: str):
    print(f"[WORKER] {msg}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Join files into one chunked stream and upload, parse or print it"
    )
    parser.add_argument("files", nargs="+", help="Input files, read in order")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--blob-url", help="Upload the joined stream to this blob URL")
    target.add_argument(
        "--csv", action="store_true", help="Parse the joined stream as CSV and print it"
    )
    parser.add_argument("--delimiter", default=",", help="CSV delimiter (default: ,)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    log(f"Worker ID: {settings.worker_id}")

    try:
        chunks = []
        for path in args.files:
            chunks.extend(read_file_chunks(path, settings.file_chunk_size, log))

        if args.blob_url:
            total = upload_chunks(
                settings.azure_storage_connection_string,
                args.blob_url,
                chunks,
                max_concurrency=settings.upload_max_concurrency,
                log=log,
            )
        elif args.csv:
            df = read_csv_chunks(
                chunks,
                CsvOptions(delimiter=args.delimiter),
                infer_schema_length=settings.csv_infer_schema_length,
                log=log,
            )
            print(df)
            total = total_length(chunks)
        else:
            with ChunkedByteReader(chunks) as reader:
                total = reader.transfer_to(sys.stdout.buffer)
            sys.stdout.buffer.flush()

        log(f"Done: {total} bytes from {len(args.files)} files")
        return 0
    except Exception as e:
        log(f"Unhandled error: {e}\n{traceback.format_exc()}")
        raise


if __name__ == "__main__":
    sys.exit(main())
