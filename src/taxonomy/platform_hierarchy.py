"""Built-in operating system family hierarchy.

Provisioning code dispatches on these tags. Distributions derive from a
family base tag, which derives from a kernel family, rooted at ``os``.
"""

from __future__ import annotations

from core.config import DispatchConfig
from taxonomy.taxonomy import Taxonomy
from taxonomy.taxonomy_loader import load_taxonomy

PLATFORM_EDGES: tuple[tuple[str, str], ...] = (
    ("linux", "os"),
    ("bsd", "os"),
    ("solaris", "os"),
    ("windows", "os"),
    ("rh-base", "linux"),
    ("debian-base", "linux"),
    ("suse-base", "linux"),
    ("arch-base", "linux"),
    ("gentoo-base", "linux"),
    ("centos", "rh-base"),
    ("rhel", "rh-base"),
    ("fedora", "rh-base"),
    ("amzn-linux", "rh-base"),
    ("debian", "debian-base"),
    ("ubuntu", "debian"),
    ("suse", "suse-base"),
    ("arch", "arch-base"),
    ("gentoo", "gentoo-base"),
    ("freebsd", "bsd"),
    ("netbsd", "bsd"),
    ("openbsd", "bsd"),
    ("darwin", "bsd"),
    ("os-x", "darwin"),
)


def platform_taxonomy() -> Taxonomy:
    """Build a sealed taxonomy of the built-in platform families."""
    taxonomy = Taxonomy(PLATFORM_EDGES)
    taxonomy.seal()
    return taxonomy


def configured_taxonomy(config: DispatchConfig | None = None) -> Taxonomy:
    """Return the taxonomy selected by runtime configuration.

    Args:
        config: Runtime config; read from the environment when omitted.

    Returns:
        The YAML taxonomy when ``taxonomy_path`` is set, otherwise the
        built-in platform hierarchy.
    """
    runtime_config = config or DispatchConfig.from_env()
    if runtime_config.taxonomy_path is not None:
        return load_taxonomy(runtime_config.taxonomy_path)
    return platform_taxonomy()
