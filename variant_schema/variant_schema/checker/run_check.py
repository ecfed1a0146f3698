#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for checking JSON/YAML documents against a schema file."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from . import check_files, load_schema
from ..engine_config import engine_config
from ..exceptions import ResolutionError, SchemaEngineError
from ..file_io.template_renderer import TemplateRenderer
from ..models.document_loader import DOCUMENT_SUFFIXES

logger = logging.getLogger(__name__)


def find_document_files(paths: List[str], exclude: List[Path] = ()) -> List[Path]:
    """Find all JSON/YAML documents in given paths."""
    document_files = []
    excluded = {p.resolve() for p in exclude}

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if path.suffix.lower() in DOCUMENT_SUFFIXES:
                document_files.append(path)
            else:
                print(f"Warning: File is not a JSON or YAML document: {path}", file=sys.stderr)
        elif path.is_dir():
            for ext in DOCUMENT_SUFFIXES:
                document_files.extend(path.rglob(f'*{ext}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(p for p in set(document_files) if p.resolve() not in excluded)


def _print_results(results, args) -> None:
    if args.format == 'json':
        output = {
            'schema': str(args.schema),
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'results': [r.to_json() for r in results],
        }
        print(json.dumps(output, indent=2))
    elif args.format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.get('line', 1)}::{error['message']}")
    elif args.format == 'markdown':
        renderer = TemplateRenderer()
        context = {
            'schema_path': str(args.schema),
            'results': results,
            'total_errors': sum(len(r.errors) for r in results),
        }
        if args.output:
            renderer.render_template_to_file('check_report.md.jinja2', args.output, **context)
        else:
            print(renderer.render_template('check_report.md.jinja2', **context), end='')
    else:  # human-readable
        for result in results:
            if result.errors:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    line_info = f":{error['line']}" if 'line' in error else ""
                    path_info = f" [{error['instance_path'] or '/'}]" if 'instance_path' in error else ""
                    print(f"  ERROR{line_info}{path_info}: {error['message']}")
