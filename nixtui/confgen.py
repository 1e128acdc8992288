"""Generate ``configuration.nix`` text from current option values.

``generate_config`` is pure: it reads the value mapping and returns lines.
Callers go through ``state.config_lines`` so results are memoized.
"""

from __future__ import annotations

from collections.abc import Mapping

from .catalog import OptionValue

WAYLAND_NATIVE = ("sway", "hyprland", "river")
X11_DESKTOPS = {
    "gnome": "services.xserver.desktopManager.gnome.enable = true;",
    "plasma6": "services.desktopManager.plasma6.enable = true;",
    "xfce": "services.xserver.desktopManager.xfce.enable = true;",
    "i3": "services.xserver.windowManager.i3.enable = true;",
}
WAYLAND_SESSIONS = {
    "plasma6": "plasmawayland",
    "gnome": "gnome",
}
DNS_SERVICES = {
    "resolved": "services.resolved.enable = true;",
    "dnsmasq": "services.dnsmasq.enable = true;",
    "unbound": "services.unbound.enable = true;",
}


def nix_literal(value: OptionValue | None) -> str:
    """Render a scalar the way Nix spells it (booleans lowercase)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return "null"
    return str(value)


def _heading(title: str) -> str:
    return f"  # ─── {title} " + "─" * max(3, 50 - len(title))


def generate_config(values: Mapping[str, OptionValue]) -> list[str]:
    g = values.get
    user = str(g("user.username") or "alice")
    shell = str(g("user.shell"))
    shell_pkg = "bashInteractive" if shell == "bash" else shell
    state_version = str(g("system.stateVersion") or "24.11")

    out: list[str] = [
        "# Auto-generated by nixtui",
        "# ⚠  Review before applying - this is a starting point, not a complete config",
        "{ config, pkgs, lib, ... }:",
        "{",
        "",
        _heading("User"),
        f"  users.users.{user} = {{",
        "    isNormalUser  = true;",
        f'    description   = "{nix_literal(g("user.fullName"))}";',
        f"    shell         = pkgs.{shell_pkg};",
        '    extraGroups   = [ "wheel" "networkmanager" "audio" "video" ];',
        '    initialPassword = "changeme"; # CHANGE after first login',
        "  };",
    ]
    if g("user.autologin"):
        out.append(f'  services.displayManager.autoLogin = {{ enable = true; user = "{user}"; }};')
    if g("user.homeManager"):
        out.extend(
            [
                "  # Home Manager (wire up home-manager flake input, then uncomment):",
                "  # home-manager.useGlobalPkgs    = true;",
                "  # home-manager.useUserPackages  = true;",
                f"  # home-manager.users.{user}        = import ./home.nix;",
            ]
        )

    out.extend(
        [
            "",
            _heading("System"),
            f'  networking.hostName = "{nix_literal(g("system.hostname"))}";',
            f'  time.timeZone       = "{nix_literal(g("system.timezone"))}";',
            f'  i18n.defaultLocale  = "{nix_literal(g("system.locale"))}";',
            "",
        ]
    )
    has_flakes = bool(g("system.flakes"))
    has_cachix = bool(g("packages.cachix"))
    if has_flakes or has_cachix:
        out.append("  nix.settings = {")
        if has_flakes:
            out.append('    experimental-features = [ "nix-command" "flakes" ];')
        if has_cachix:
            out.append('    substituters = [ "https://cache.nixos.org" "https://cachix.cachix.org" ];')
        out.append("  };")
    if g("system.optimize"):
        out.append("  nix.optimise.automatic = true;")
    if g("system.gc"):
        out.extend(
            [
                "  nix.gc = {",
                "    automatic = true;",
                '    dates     = "weekly";',
                f'    options   = "--delete-older-than {nix_literal(g("system.gcDays"))}d";',
                "  };",
            ]
        )
    if g("system.autoUpgrade"):
        out.append("  system.autoUpgrade.enable = true;")

    out.extend(["", _heading("Desktop")])
    out.extend(_desktop_lines(str(g("desktop.de")), str(g("desktop.dm")), bool(g("desktop.wayland"))))
    if g("desktop.pipewire"):
        out.extend(
            [
                "  hardware.pulseaudio.enable = false;",
                "  services.pipewire = {",
                "    enable = true; alsa.enable = true; pulse.enable = true;",
                "  };",
            ]
        )
    if g("desktop.bluetooth"):
        out.append("  hardware.bluetooth.enable = true;")
    if g("desktop.printing"):
        out.append("  services.printing.enable = true;")

    out.extend(["", _heading("Network")])
    if g("network.networkmanager"):
        out.append("  networking.networkmanager.enable = true;")
    out.append(f"  networking.firewall.enable = {nix_literal(g('network.firewall'))};")
    out.append(f"  networking.enableIPv6      = {nix_literal(g('network.ipv6'))};")
    dns_line = DNS_SERVICES.get(str(g("network.dns")))
    if dns_line:
        out.append(f"  {dns_line}")
    if g("network.ssh"):
        port = nix_literal(g("network.sshPort"))
        out.extend(
            [
                "  services.openssh = {",
                "    enable = true;",
                f"    ports  = [ {port} ];",
                "    settings = {",
                f"      PasswordAuthentication = {nix_literal(g('network.sshPwAuth'))};",
                '      PermitRootLogin        = "no";',
                "    };",
                "  };",
                f"  networking.firewall.allowedTCPPorts = [ {port} ];",
            ]
        )
    if g("network.tailscale"):
        out.append("  services.tailscale.enable = true;")

    out.extend(
        [
            "",
            _heading("Security"),
            f"  security.sudo.enable             = {nix_literal(g('security.sudo'))};",
            f"  security.sudo.wheelNeedsPassword = {nix_literal(g('security.sudoWheel'))};",
        ]
    )
    if g("security.apparmor"):
        out.append("  security.apparmor.enable = true;")
    if g("security.tpm"):
        out.append("  security.tpm2.enable = true;")
    if g("security.polkit"):
        out.append("  security.polkit.enable = true;")
    if g("security.aslr"):
        out.append('  boot.kernel.sysctl."kernel.randomize_va_space" = 2;')

    out.extend(["", _heading("Packages")])
    if g("packages.unfree"):
        out.append("  nixpkgs.config.allowUnfree = true;")
    if g("packages.nix-ld"):
        out.append("  programs.nix-ld.enable = true;")
    if g("packages.flatpak"):
        out.append("  services.flatpak.enable = true;")
    if g("packages.nur"):
        out.append("  # NUR: add 'nur' to flake inputs, then:")
        out.append("  # nixpkgs.overlays = [ nur.overlay ];")

    extra_shell = f"{shell_pkg} " if shell_pkg != "bashInteractive" else ""
    out.extend(
        [
            "",
            "  environment.systemPackages = with pkgs; [",
            f"    {extra_shell}vim git curl wget htop",
            "    # add your packages here",
            "  ];",
            "",
            f'  system.stateVersion = "{state_version}"; # do not change after install',
            "}",
        ]
    )
    return out


def _desktop_lines(de: str, dm: str, use_wayland: bool) -> list[str]:
    if de == "none":
        return []
    lines: list[str] = []
    if de in WAYLAND_NATIVE:
        # Wayland compositors run without xserver.
        lines.append(f"  programs.{de}.enable = true;")
        if dm == "greetd":
            lines.append("  services.greetd.enable = true;")
        return lines

    lines.append("  services.xserver.enable = true;")
    if dm == "greetd":
        lines.append("  services.greetd.enable = true;")
    elif dm != "none":
        lines.append(f"  services.xserver.displayManager.{dm}.enable = true;")
    desktop_line = X11_DESKTOPS.get(de)
    if desktop_line:
        lines.append(f"  {desktop_line}")
    session = WAYLAND_SESSIONS.get(de)
    if use_wayland and session:
        lines.append(f'  services.xserver.displayManager.defaultSession = "{session}";')
    return lines


__all__ = ["generate_config", "nix_literal"]
