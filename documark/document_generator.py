"""Orchestration of document generation for an assembly."""

import logging
import shutil
from pathlib import Path

from documark.assembly_details import framework_string
from documark.assembly_info import AssemblyInfo
from documark.backend import Backend
from documark.documentation import Documentation
from documark.overload_groups import overload_groups
from documark.path_resolver import DEFAULT_OUTPUT_ROOT, PathResolver
from documark.render_context import DEFAULT_IGNORED_REFERENCES, RenderContext
from documark.render_member_document import render_member_document
from documark.render_type_document import render_type_document
from documark.type_selection import MetadataIntrospector

logger = logging.getLogger(__name__)


class DocumentGenerator:
    """Writes one document per visible type and one per overload group.

    Each run starts by deleting the assembly's output root, so generating the
    same assembly twice yields the same tree.
    """

    def __init__(
        self,
        documentation: Documentation,
        backend: Backend,
        *,
        output_root: str | Path = DEFAULT_OUTPUT_ROOT,
        introspector: MetadataIntrospector | None = None,
        code_language: str = "cs",
        ignored_references: tuple[str, ...] = DEFAULT_IGNORED_REFERENCES,
    ) -> None:
        """Initialize with the documentation oracle and an output backend."""
        self.documentation = documentation
        self.backend = backend
        self.introspector = introspector or MetadataIntrospector()
        self.paths = PathResolver(backend.extension, output_root)
        self.ctx = RenderContext.create(
            documentation,
            backend,
            self.paths,
            code_language=code_language,
            ignored_references=ignored_references,
        )

    def generate(self, assembly: AssemblyInfo) -> list[Path]:
        """Regenerate every document of an assembly and return the written paths."""
        # Fail before touching the output tree
        framework_string(assembly)

        # Delete assembly root directory (if exists) and regenerate it
        root = self.paths.root_for(assembly.name)
        if root.exists():
            logger.info("Removing previous output: %s", root)
            shutil.rmtree(root)

        written: list[Path] = []
        for type_info in self.documentation.get_visible_types(assembly):
            selection = self.introspector.select(type_info)
            written.append(
                self._write(
                    self.paths.path_for(type_info),
                    render_type_document(selection, self.ctx),
                )
            )

            # Enum values and delegate signatures live on the type document
            if type_info.is_enum or type_info.is_delegate:
                continue

            for members in overload_groups(selection).values():
                written.append(
                    self._write(
                        self.paths.path_for(members[0]),
                        render_member_document(selection, members, self.ctx),
                    )
                )

        logger.info("Wrote %d documents for %s", len(written), assembly.name)
        return written

    @staticmethod
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.debug("Wrote %s", path)
        return path
