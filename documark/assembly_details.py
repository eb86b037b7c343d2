"""Logic for describing the assembly a type belongs to."""

from documark.assembly_info import AssemblyInfo
from documark.errors import MissingMetadataError
from documark.render_context import RenderContext


def framework_string(assembly: AssemblyInfo) -> str:
    """Return the target framework's display name, falling back to its name."""
    framework = assembly.framework
    if framework is None:
        msg = f"Assembly {assembly.name} has no target framework attribute"
        raise MissingMetadataError(msg)

    display_name = framework.display_name
    if not display_name.strip():
        display_name = framework.name
    return display_name


def dependencies_string(assembly: AssemblyInfo, ctx: RenderContext) -> str:
    """Link every referenced assembly, or 'None' for a lone reference."""
    if len(assembly.references) > 1:
        links = [
            ctx.backend.link(name, ctx.paths.dependency_link(name))
            for name in assembly.references
            if name not in ctx.ignored_references
        ]
        return ", ".join(links)
    return "None"
