"""Integration tests for platform dispatch through the public SDK."""

from __future__ import annotations

import pytest

from platform_dispatch import (
    ANY_VERSION,
    Criterion,
    DispatchNotFound,
    DispatchRegistry,
    ExactVersion,
    PlatformTarget,
    Taxonomy,
    VersionRange,
    build,
    lookup_for_target,
    parse_version,
    platform_taxonomy,
    select_for_target,
    validate_families,
)


@pytest.fixture
def install_registry() -> DispatchRegistry:
    registry = DispatchRegistry(name="install")
    registry.register(Criterion("linux", ANY_VERSION, ANY_VERSION), lambda *args: "generic-install")
    registry.register(
        Criterion("ubuntu", VersionRange(parse_version("12.4"), None), ANY_VERSION),
        lambda *args: "ubuntu-install",
    )
    registry.register(
        Criterion("ubuntu", ANY_VERSION, ExactVersion(parse_version("2"))),
        lambda *args: "ubuntu-v2-install",
    )
    registry.seal()
    return registry


@pytest.fixture
def scenario_taxonomy() -> Taxonomy:
    taxonomy = Taxonomy()
    taxonomy.add_edge("ubuntu", "debian")
    taxonomy.add_edge("debian", "linux")
    taxonomy.add_edge("centos", "linux")
    taxonomy.seal()
    return taxonomy


def test_family_version_range_beats_component_exact(
    install_registry: DispatchRegistry, scenario_taxonomy: Taxonomy
) -> None:
    """Ubuntu 14.4 with component 2.1 should pick the platform-range handler."""
    assert install_registry.select(scenario_taxonomy, "ubuntu", "14.4", "2.1") == "ubuntu-install"


def test_sibling_family_falls_back_to_common_ancestor(
    install_registry: DispatchRegistry, scenario_taxonomy: Taxonomy
) -> None:
    """CentOS should only match the linux handler."""
    assert install_registry.select(scenario_taxonomy, "centos", "7.0", "1.0") == "generic-install"


def test_unrelated_family_without_default_is_not_found(
    install_registry: DispatchRegistry, scenario_taxonomy: Taxonomy
) -> None:
    """Windows has no path to linux and no default exists."""
    with pytest.raises(DispatchNotFound):
        install_registry.select(scenario_taxonomy, "windows", "10.0", "1.0")


def test_old_ubuntu_uses_component_version_handler(
    install_registry: DispatchRegistry, scenario_taxonomy: Taxonomy
) -> None:
    """Below the platform range the component-version handler should apply."""
    assert (
        install_registry.select(scenario_taxonomy, "ubuntu", "10.4", "2.1") == "ubuntu-v2-install"
        and install_registry.select(scenario_taxonomy, "ubuntu", "10.4", "3") == "generic-install"
    )


def test_admin_user_provisioning_plan_varies_by_platform() -> None:
    """Handlers and lookup values should combine into a per-platform plan."""
    taxonomy = platform_taxonomy()
    sudoers_group = build({"linux": "sudo", "rh-base": "wheel"})
    create_user = DispatchRegistry(name="create-user")

    @create_user.register_for("linux")
    def create_linux_user(family, family_version, version, user_name):
        return f"useradd -m -s /bin/bash {user_name}"

    @create_user.register_for("debian-base", family_version=["6", None])
    def create_debian_user(family, family_version, version, user_name):
        return f"adduser --disabled-password {user_name}"

    @create_user.register_default
    def unsupported(family, family_version, version, user_name):
        return None

    validate_families(create_user, taxonomy, policy="error")
    create_user.seal()

    def plan(target: PlatformTarget) -> tuple[object, object]:
        command = select_for_target(create_user, taxonomy, target, None, "fred")
        return command, lookup_for_target(sudoers_group, taxonomy, target)

    assert [
        plan(PlatformTarget("ubuntu", "22.04")),
        plan(PlatformTarget("centos", "7")),
        plan(PlatformTarget("debian", "5.0")),
        plan(PlatformTarget("windows", "10")),
    ] == [
        ("adduser --disabled-password fred", "sudo"),
        ("useradd -m -s /bin/bash fred", "wheel"),
        ("useradd -m -s /bin/bash fred", "sudo"),
        (None, None),
    ]
