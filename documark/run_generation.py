"""Orchestration logic for generating documents from assembly metadata."""

import argparse
import logging
from pathlib import Path
from typing import Any

from documark.assembly_info import AssemblyInfo
from documark.document_generator import DocumentGenerator
from documark.documentation import Documentation
from documark.get_backend import get_backend
from documark.load_assembly import load_assembly
from documark.load_config import load_config
from documark.load_doc_comments import load_doc_comments
from documark.type_selection import MetadataIntrospector

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    metadata_files = [Path(p) for p in args.metadata]
    missing = [str(p) for p in metadata_files if not p.is_file()]
    if not metadata_files or missing:
        msg = f"Assembly metadata not found: {', '.join(missing) or '(none given)'}"
        raise SystemExit(msg)

    config = _init_config(args)
    documentation = Documentation()
    assemblies = _load_assemblies(metadata_files, args.docs_dir, documentation)

    generator = DocumentGenerator(
        documentation,
        get_backend(config["format"]),
        output_root=config["output_root"],
        introspector=MetadataIntrospector(config["ignored_method_names"]),
        code_language=config["code_language"],
        ignored_references=tuple(config["ignored_references"]),
    )

    written = 0
    for assembly in assemblies:
        print(f"Generating documents for {assembly.name}...")
        written += len(generator.generate(assembly))

    out_root = Path(config["output_root"]).resolve()
    print(f"Generated {written} documents into: {out_root}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command line overrides."""
    config = load_config(args.config)
    if args.format:
        config["format"] = args.format
    if args.out_dir:
        config["output_root"] = str(args.out_dir)
    return config


def _load_assemblies(
    metadata_files: list[Path],
    docs_dir: Path | None,
    documentation: Documentation,
) -> list[AssemblyInfo]:
    """Load every assembly before generating so crefs resolve across them."""
    assemblies = []
    for path in metadata_files:
        assembly = load_assembly(path)
        xml_path = (docs_dir or path.parent) / f"{path.stem}.xml"
        documentation.add_assembly(assembly, load_doc_comments(xml_path))
        assemblies.append(assembly)
        logger.info("Loaded %s (%d types)", assembly.name, len(assembly.types))
    return assemblies
