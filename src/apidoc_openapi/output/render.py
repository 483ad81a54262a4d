"""Write a document to disk in the format selected by the output options."""

import logging
import time
from pathlib import Path

from apidoc_openapi.doc.base import Document
from apidoc_openapi.output.options import FILENAMES, Options

logger = logging.getLogger(__name__)


def filter_groups(doc: Document, options: Options) -> Document:
    """Return a copy of ``doc`` holding only the apis of the selected groups."""
    if not options.groups:
        return doc
    apis = [api for api in doc.apis if options.contains(api.group)]
    return doc.model_copy(update={"apis": apis})


def render(doc: Document, options: Options) -> Path:
    """Marshal ``doc`` and write it to ``options.path``.

    If the path is an existing directory, the default file name for the
    output type is used inside it. Returns the path written.
    """
    start = time.perf_counter()
    options.sanitize()

    data = options.marshal(filter_groups(doc, options))

    path = Path(options.path)
    if path.is_dir():
        path = path / FILENAMES[options.type]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)

    logger.info("wrote %s (%s) in %.3fs", path, options.type, time.perf_counter() - start)
    return path
