"""Static catalog of configurable NixOS options.

Sections and fields are read-only. Current values live in ``AppState``
keyed by ``field_id(section, field)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

OptionValue = bool | int | float | str

KIND_BOOL = "bool"
KIND_STRING = "string"
KIND_ENUM = "enum"
KIND_NUMBER = "number"
EDITABLE_KINDS = frozenset({KIND_STRING, KIND_NUMBER})


@dataclass(frozen=True)
class OptionField:
    key: str
    label: str
    kind: str
    default: OptionValue
    description: str
    choices: tuple[str, ...] = ()
    minimum: float | None = None
    maximum: float | None = None
    placeholder: str = ""

    @property
    def editable(self) -> bool:
        """Whether the field is edited through the inline text box."""
        return self.kind in EDITABLE_KINDS


@dataclass(frozen=True)
class OptionSection:
    id: str
    icon: str
    label: str
    fields: tuple[OptionField, ...]


def field_id(section: OptionSection, field: OptionField) -> str:
    """Return the stable value-map key for ``field`` within ``section``."""
    return f"{section.id}.{field.key}"


SECTIONS: tuple[OptionSection, ...] = (
    OptionSection(
        id="user",
        icon="👤",
        label="User",
        fields=(
            OptionField("username", "Username", KIND_STRING, "alice",
                        "Primary user account (users.users.<n>)", placeholder="e.g. alice"),
            OptionField("fullName", "Full Name", KIND_STRING, "Alice",
                        "users.users.<n>.description", placeholder="e.g. Alice Smith"),
            OptionField("shell", "Default Shell", KIND_ENUM, "bash",
                        "users.users.<n>.shell = pkgs.<shell>",
                        choices=("bash", "zsh", "fish", "nushell", "elvish")),
            OptionField("homeManager", "Home Manager", KIND_BOOL, False,
                        "Enable nix-community/home-manager NixOS module"),
            OptionField("autologin", "Auto Login", KIND_BOOL, False,
                        "services.displayManager.autoLogin.enable"),
        ),
    ),
    OptionSection(
        id="system",
        icon="⚙",
        label="System",
        fields=(
            OptionField("hostname", "Hostname", KIND_STRING, "nixos",
                        "networking.hostName", placeholder="e.g. mymachine"),
            OptionField("timezone", "Time Zone", KIND_ENUM, "UTC", "time.timeZone",
                        choices=("UTC", "America/New_York", "America/Chicago", "America/Los_Angeles",
                                 "America/Denver", "Europe/London", "Europe/Berlin", "Europe/Paris",
                                 "Asia/Tokyo", "Asia/Singapore", "Australia/Sydney")),
            OptionField("locale", "Locale", KIND_ENUM, "en_US.UTF-8", "i18n.defaultLocale",
                        choices=("en_US.UTF-8", "en_GB.UTF-8", "de_DE.UTF-8", "fr_FR.UTF-8",
                                 "es_ES.UTF-8", "ja_JP.UTF-8")),
            OptionField("flakes", "Enable Flakes", KIND_BOOL, True,
                        'nix.settings.experimental-features = [ "nix-command" "flakes" ]'),
            OptionField("gc", "Auto GC", KIND_BOOL, True,
                        "nix.gc.automatic - weekly garbage collection"),
            OptionField("gcDays", "GC Keep Days", KIND_NUMBER, 30,
                        "nix.gc.options --delete-older-than Nd", minimum=1, maximum=365),
            OptionField("autoUpgrade", "Auto Upgrade", KIND_BOOL, False, "system.autoUpgrade.enable"),
            OptionField("optimize", "Store Optimise", KIND_BOOL, True,
                        "nix.optimise.automatic - deduplicates the store with hard-links"),
            OptionField("stateVersion", "State Version", KIND_ENUM, "24.11",
                        "system.stateVersion - set once at install, never change",
                        choices=("24.05", "24.11", "25.05")),
        ),
    ),
    OptionSection(
        id="desktop",
        icon="🖥",
        label="Desktop",
        fields=(
            OptionField("de", "Desktop / WM", KIND_ENUM, "plasma6",
                        "gnome/plasma6/xfce -> desktopManager; i3 -> windowManager; sway/hyprland -> programs.*",
                        choices=("gnome", "plasma6", "xfce", "i3", "sway", "hyprland", "river", "none")),
            OptionField("dm", "Display Manager", KIND_ENUM, "sddm",
                        "gdm/sddm/lightdm -> services.xserver.displayManager; greetd -> services.greetd",
                        choices=("gdm", "sddm", "lightdm", "greetd", "none")),
            OptionField("wayland", "Wayland", KIND_BOOL, True, "Prefer Wayland session where available"),
            OptionField("pipewire", "PipeWire", KIND_BOOL, True,
                        "services.pipewire.enable + disable pulseaudio"),
            OptionField("bluetooth", "Bluetooth", KIND_BOOL, False, "hardware.bluetooth.enable"),
            OptionField("printing", "CUPS Printing", KIND_BOOL, False, "services.printing.enable"),
            OptionField("dpi", "Screen DPI", KIND_NUMBER, 96,
                        "services.xserver.dpi (96=1x, 144=1.5x, 192=2x)", minimum=72, maximum=300),
        ),
    ),
    OptionSection(
        id="network",
        icon="🌐",
        label="Network",
        fields=(
            OptionField("networkmanager", "NetworkManager", KIND_BOOL, True,
                        "networking.networkmanager.enable"),
            OptionField("firewall", "Firewall", KIND_BOOL, True, "networking.firewall.enable"),
            OptionField("ssh", "SSH Server", KIND_BOOL, False, "services.openssh.enable"),
            OptionField("sshPwAuth", "SSH Password Auth", KIND_BOOL, False,
                        "services.openssh.settings.PasswordAuthentication"),
            OptionField("sshPort", "SSH Port", KIND_NUMBER, 22, "services.openssh.ports = [ N ]",
                        minimum=1, maximum=65535),
            OptionField("dns", "DNS Resolver", KIND_ENUM, "resolved", "systemd-resolved / dnsmasq / unbound",
                        choices=("resolved", "dnsmasq", "unbound", "none")),
            OptionField("ipv6", "IPv6", KIND_BOOL, True, "networking.enableIPv6"),
            OptionField("tailscale", "Tailscale", KIND_BOOL, False, "services.tailscale.enable"),
        ),
    ),
    OptionSection(
        id="security",
        icon="🔒",
        label="Security",
        fields=(
            OptionField("sudo", "Sudo", KIND_BOOL, True, "security.sudo.enable"),
            OptionField("sudoWheel", "Wheel Needs PW", KIND_BOOL, True, "security.sudo.wheelNeedsPassword"),
            OptionField("apparmor", "AppArmor", KIND_BOOL, False, "security.apparmor.enable"),
            OptionField("tpm", "TPM2", KIND_BOOL, False, "security.tpm2.enable"),
            OptionField("secureBoot", "Secure Boot", KIND_BOOL, False,
                        "boot.loader.systemd-boot.secureBoot (needs lanzaboote)"),
            OptionField("aslr", "Full ASLR", KIND_BOOL, True,
                        'boot.kernel.sysctl."kernel.randomize_va_space" = 2'),
            OptionField("polkit", "Polkit", KIND_BOOL, True, "security.polkit.enable"),
        ),
    ),
    OptionSection(
        id="packages",
        icon="📦",
        label="Packages",
        fields=(
            OptionField("unfree", "Allow Unfree", KIND_BOOL, False, "nixpkgs.config.allowUnfree = true"),
            OptionField("nix-ld", "nix-ld", KIND_BOOL, False,
                        "programs.nix-ld.enable - run unpatched ELF binaries"),
            OptionField("flatpak", "Flatpak", KIND_BOOL, False, "services.flatpak.enable"),
            OptionField("cachix", "Cachix", KIND_BOOL, False,
                        "nix.settings.substituters += cachix.cachix.org"),
            OptionField("nur", "NUR Overlay", KIND_BOOL, False,
                        "Nix User Repository overlay (add nur flake input)"),
            OptionField("channel", "Nixpkgs Channel", KIND_ENUM, "nixos-unstable",
                        "Flake input URL / nix-channel target",
                        choices=("nixos-24.11", "nixos-25.05", "nixos-unstable", "nixos-unstable-small")),
        ),
    ),
)


def default_values() -> MappingProxyType:
    """Return a read-only mapping of every field id to its catalog default."""
    return MappingProxyType(
        {field_id(section, field): field.default for section in SECTIONS for field in section.fields}
    )


__all__ = [
    "EDITABLE_KINDS",
    "KIND_BOOL",
    "KIND_ENUM",
    "KIND_NUMBER",
    "KIND_STRING",
    "OptionField",
    "OptionSection",
    "OptionValue",
    "SECTIONS",
    "default_values",
    "field_id",
]
