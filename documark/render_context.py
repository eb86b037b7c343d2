"""The collaborators every document renderer needs."""

from dataclasses import dataclass

from documark.backend import Backend
from documark.badge_composer import BadgeComposer
from documark.doc_comment_renderer import DocCommentRenderer
from documark.documentation import Documentation
from documark.path_resolver import PathResolver

DEFAULT_IGNORED_REFERENCES = ("netstandard",)


@dataclass(frozen=True)
class RenderContext:
    """Backend, comment renderer, badges and paths for one generation run."""

    documentation: Documentation
    backend: Backend
    comments: DocCommentRenderer
    badges: BadgeComposer
    paths: PathResolver
    code_language: str = "cs"
    ignored_references: tuple[str, ...] = DEFAULT_IGNORED_REFERENCES

    @classmethod
    def create(
        cls,
        documentation: Documentation,
        backend: Backend,
        paths: PathResolver,
        *,
        code_language: str = "cs",
        ignored_references: tuple[str, ...] = DEFAULT_IGNORED_REFERENCES,
    ) -> "RenderContext":
        """Build a context, wiring the comment renderer and badge composer."""
        return cls(
            documentation=documentation,
            backend=backend,
            comments=DocCommentRenderer(documentation, backend, code_language),
            badges=BadgeComposer(documentation, backend),
            paths=paths,
            code_language=code_language,
            ignored_references=ignored_references,
        )
