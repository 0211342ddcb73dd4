"""
CLI entrypoint for the hybrid taxonomy browser.

This script performs the following steps:
- loads .env (if present) and configs/browser.yaml
- configures console (and optional file) logging
- loads the taxonomy JSON document
- runs advisory validation (and the optional JSON Schema check), refusing to continue only in strict mode
- applies genus/facet filters, sorting, and grouping
- prints a Markdown view of the taxonomy or of the filtered results
- optionally writes the group summary CSV and a re-serialized copy of the document
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import (
    browse,
    check_against_schema,
    check_taxonomy,
    filters_from_input,
    render_results,
    render_schema_problems,
    render_taxonomy,
)
from application.constants import GROUP_SUMMARY_FILENAME, LOG_FILENAME, OUTPUT_ROOT
from application.render import render_validation_errors
from domain.query import group_summary_table_and_save
from domain.taxonomy import LoadError, TaxonomySchemaError
from infrastructure.config import load_browser_config
from infrastructure.io import (
    describe_io_error,
    read_document_json,
    read_schema_file,
    read_taxonomy_file,
    write_taxonomy_file,
)
from infrastructure.observability import configure_logging, make_doc_tag, set_log_context

logger = logging.getLogger(__name__)

_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_EPILOG = """\
Filtering logic:
  - Multiple --genus values are combined with OR
  - Multiple --facet values for the SAME facet name are combined with OR
  - Different filter types (genus vs facets) are combined with AND
  - Different facet names are combined with AND

Sorting:
  - name: alphabetical by item name, ignoring leading articles
  - any facet name: by that facet's value, then by name

Grouping:
  - Items with multiple values for the grouping facet appear in multiple groups
"""


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Browse a hybrid taxonomy: filter, sort, and group items",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", type=str, help="Path to the hybrid taxonomy JSON file")
    p.add_argument(
        "-g",
        "--genus",
        dest="genera",
        action="append",
        default=[],
        metavar="NAME",
        help="Filter by genus (repeatable, OR logic)",
    )
    p.add_argument(
        "-f",
        "--facet",
        dest="facets",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Filter by facet value (repeatable)",
    )
    p.add_argument("-s", "--sort", dest="sort_by", type=str, default=None, metavar="FIELD", help="Sort by name or facet")
    p.add_argument("-G", "--group-by", dest="group_by", type=str, default=None, metavar="FACET", help="Group by facet")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to browser.yaml (default: $TAXONOMY_BROWSER_CONFIG or configs/browser.yaml)",
    )
    p.add_argument("--env", type=str, default=".env", help="Path to .env file (default: .env, optional)")
    p.add_argument(
        "--schema",
        type=str,
        default=None,
        metavar="FILE",
        help="Also check the document against this JSON Schema file (default: validation.schema_file)",
    )
    p.add_argument("--strict", action="store_true", help="Exit with an error if validation finds problems")
    p.add_argument("--validate-only", action="store_true", help="Only validate the document")
    p.add_argument(
        "--summary-csv",
        type=str,
        nargs="?",
        const=str(OUTPUT_ROOT / GROUP_SUMMARY_FILENAME),
        default=None,
        help=f"Write the group summary table to this CSV (default: {OUTPUT_ROOT / GROUP_SUMMARY_FILENAME})",
    )
    p.add_argument("--save", type=str, default=None, help="Write the loaded document back to this path")
    p.add_argument("--console-level", type=str, default=None, choices=_LEVELS, help="Console log level")
    p.add_argument(
        "--log-file",
        type=str,
        nargs="?",
        const=str(OUTPUT_ROOT / "logs" / LOG_FILENAME),
        default=None,
        help="Also log to this file (rotating)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=False)

    cfg = load_browser_config(Path(args.config) if args.config else None)

    log_cfg = cfg.logging
    if args.console_level:
        log_cfg = log_cfg.model_copy(update={"console_level": args.console_level})
    log_file = Path(args.log_file) if args.log_file else log_cfg.log_file
    configure_logging(
        log_file=log_file,
        console_level=log_cfg.console_level_no,
        file_level=log_cfg.file_level_no,
    )

    taxonomy_path = Path(args.file)
    set_log_context(document=taxonomy_path.resolve())
    logger.info("Browsing %s (doc_tag=%s)", taxonomy_path, make_doc_tag(str(taxonomy_path.resolve())))

    try:
        taxonomy = read_taxonomy_file(taxonomy_path)
    except LoadError as e:
        logger.error("Error loading taxonomy from '%s': %s", taxonomy_path, e)
        return 1
    except OSError as e:
        title, message, details = describe_io_error(e, taxonomy_path)
        logger.error("%s: %s %s", title, message, details)
        return 1

    schema_problems: list[str] = []
    schema_path = Path(args.schema) if args.schema else cfg.validation.schema_file
    if schema_path is not None:
        try:
            schema = read_schema_file(schema_path)
            document = read_document_json(taxonomy_path)
        except (LoadError, TaxonomySchemaError) as e:
            logger.error("Error loading schema from '%s': %s", schema_path, e)
            return 1
        except OSError as e:
            title, message, details = describe_io_error(e, schema_path)
            logger.error("%s: %s %s", title, message, details)
            return 1
        schema_problems = check_against_schema(document, taxonomy, schema)

    errors = check_taxonomy(taxonomy, cfg)
    strict = args.strict or cfg.validation.strict
    if errors:
        print(render_validation_errors(errors), file=sys.stderr)
    if schema_problems:
        print(render_schema_problems(schema_problems), file=sys.stderr)
    if errors or schema_problems:
        if strict or args.validate_only:
            print("\nPlease fix these errors and try again.", file=sys.stderr)
            return 1

    if args.validate_only:
        logger.info("Document is valid.")
        return 0

    filters, dropped = filters_from_input(args.genera, args.facets, cfg, root_label=taxonomy.hierarchy.root_label)

    if not filters.is_empty() or args.sort_by or args.group_by:
        result = browse(
            taxonomy,
            filters,
            cfg,
            sort_field=args.sort_by,
            group_field=args.group_by,
            dropped_tokens=dropped,
        )
        print(render_results(result))

        if args.summary_csv:
            if result.groups is None:
                logger.warning("--summary-csv needs --group-by; no summary written.")
            else:
                summary_path = group_summary_table_and_save(
                    result.groups, result.group_field or "", Path(args.summary_csv)
                )
                logger.info("Saved group summary table to %s", summary_path)
    else:
        print(render_taxonomy(taxonomy))

    if args.save:
        save_path = Path(args.save)
        try:
            write_taxonomy_file(save_path, taxonomy)
        except OSError as e:
            title, message, details = describe_io_error(e, save_path, writing=True)
            logger.error("%s: %s %s", title, message, details)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
