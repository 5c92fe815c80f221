#!/usr/bin/env python3
"""
Load documents from a JSON file into the document store.

Teams and league usersTeams mappings have no endpoint that creates them;
use this script to seed them. Existing keys are overwritten.

The file holds either a mapping of key -> document, or a list of
documents each carrying its key in an "id" field.

Usage:
    python scripts/load_documents.py documents.json
"""

import argparse
import json
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from league_api import create_app, db  # noqa: E402
from league_api.logger import get_logger  # noqa: E402
from league_api.repositories.base import DocumentRepository, StoreError  # noqa: E402

logger = get_logger('league_api.scripts.load_documents')


def iter_documents(data):
    """Yield (key, document) pairs from the decoded file."""
    if isinstance(data, dict):
        yield from data.items()
        return
    if isinstance(data, list):
        for document in data:
            if not isinstance(document, dict) or not isinstance(document.get('id'), str):
                raise ValueError(f"Document without a string id: {document!r}")
            yield document['id'], document
        return
    raise ValueError("Expected a JSON object or a JSON array of documents")


def load_documents(path, config_name=None):
    """Upsert every document in the file at path.

    Returns:
        Number of documents written.
    """
    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    app = create_app(config_name)
    repo = DocumentRepository()

    with app.app_context():
        count = 0
        try:
            for key, document in iter_documents(data):
                result = repo.upsert(key, document)
                logger.info(f"Stored {key} (cas={result.cas})")
                count += 1
            db.session.commit()
        except (StoreError, ValueError):
            db.session.rollback()
            raise
        return count


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument('path', help='JSON file with the documents to load')
    parser.add_argument('--config', default=None, help="Config name (defaults to FLASK_CONFIG)")
    args = parser.parse_args(argv)

    try:
        count = load_documents(args.path, args.config)
    except (OSError, ValueError, StoreError) as e:
        logger.error(f"Loading {args.path} failed: {e}")
        return 1

    logger.info(f"Loaded {count} documents from {args.path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
