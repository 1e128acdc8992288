"""Static catalog of step-by-step NixOS tutorials."""

from __future__ import annotations

from dataclasses import dataclass

BEGINNER = "beginner"
INTERMEDIATE = "intermediate"
ADVANCED = "advanced"


@dataclass(frozen=True)
class TutorialStep:
    title: str
    body: tuple[str, ...] = ()
    code: str = ""
    tip: str = ""


@dataclass(frozen=True)
class Tutorial:
    id: str
    icon: str
    label: str
    difficulty: str
    steps: tuple[TutorialStep, ...]


TUTORIALS: tuple[Tutorial, ...] = (
    Tutorial(
        id="first-boot",
        icon="🚀",
        label="First Boot Checklist",
        difficulty=BEGINNER,
        steps=(
            TutorialStep(
                title="Welcome to NixOS",
                body=(
                    "NixOS is a declarative, reproducible Linux distro.",
                    "Your entire system is described in /etc/nixos/configuration.nix",
                    "or flake.nix - version-controllable and rollback-safe.",
                    "",
                    "This TUI lets you configure settings and preview the",
                    "generated configuration.nix before applying it.",
                ),
                tip="Use Settings to configure, Export -> W to save, then nixos-rebuild switch.",
            ),
            TutorialStep(
                title="Set Hostname & Timezone",
                body=("Edit /etc/nixos/configuration.nix:",),
                code="""networking.hostName = "mymachine";
time.timeZone = "America/New_York";
i18n.defaultLocale = "en_US.UTF-8";""",
                tip="Apply with: sudo nixos-rebuild switch",
            ),
            TutorialStep(
                title="Create a User Account",
                body=("Add a non-root user with sudo (wheel) access:",),
                code="""users.users.alice = {
  isNormalUser = true;
  extraGroups  = [ "wheel" "networkmanager" "audio" "video" ];
  initialPassword = "changeme"; # change immediately!
};""",
                tip="Run passwd alice after first login to set a real password.",
            ),
            TutorialStep(
                title="Enable Networking",
                body=("NetworkManager is the easiest option:",),
                code="""networking.networkmanager.enable = true;
# Your user needs to be in the networkmanager group""",
                tip="For Wi-Fi in a terminal: nmtui",
            ),
            TutorialStep(
                title="Install Packages",
                body=("Add packages to environment.systemPackages:",),
                code="""environment.systemPackages = with pkgs; [
  vim git curl wget htop bat eza
  # set nixpkgs.config.allowUnfree = true for proprietary packages
];""",
                tip="Search: nix search nixpkgs <n>  or  search.nixos.org",
            ),
            TutorialStep(
                title="Rebuild & Rollback",
                body=("Commands you'll use every day:",),
                code="""sudo nixos-rebuild switch           # apply immediately
sudo nixos-rebuild switch --upgrade  # apply + upgrade
sudo nixos-rebuild boot              # apply at next reboot
sudo nixos-rebuild test              # apply, no boot entry
sudo nixos-rebuild switch --rollback # undo last switch""",
                tip="Every rebuild creates a generation. Pick any from the boot menu.",
            ),
        ),
    ),
    Tutorial(
        id="flakes",
        icon="❄",
        label="Flakes Crash Course",
        difficulty=INTERMEDIATE,
        steps=(
            TutorialStep(
                title="What is a Flake?",
                body=(
                    "Flakes replace channels with a locked dependency graph.",
                    "flake.lock pins every input - commit it to git and every",
                    "machine builds identically from the same sources.",
                    "",
                    "Enable flakes first in your config:",
                ),
                code='nix.settings.experimental-features = [ "nix-command" "flakes" ];',
                tip="After rebuilding, all nix and nixos-rebuild commands gain flake support.",
            ),
            TutorialStep(
                title="Minimal flake.nix",
                body=("Place in /etc/nixos/ alongside configuration.nix:",),
                code="""{
  description = "My NixOS config";
  inputs.nixpkgs.url = "github:NixOS/nixpkgs/nixos-unstable";

  outputs = { self, nixpkgs }: {
    nixosConfigurations.hostname = nixpkgs.lib.nixosSystem {
      system = "x86_64-linux";
      modules = [ ./configuration.nix ];
    };
  };
}""",
                tip="Replace 'hostname' with your actual machine hostname.",
            ),
            TutorialStep(
                title="Rebuild with Flakes",
                code="""# From /etc/nixos
sudo nixos-rebuild switch --flake .#hostname

# From anywhere
sudo nixos-rebuild switch --flake /etc/nixos#hostname""",
                tip="The #hostname part matches your nixosConfigurations attribute name.",
            ),
            TutorialStep(
                title="Managing Inputs",
                code="""nix flake update                        # update all inputs
nix flake lock --update-input nixpkgs   # update one
nix flake show                          # list all outputs
nix flake metadata                      # show locked versions""",
                tip="Always commit flake.lock to git - it's your reproducibility guarantee.",
            ),
            TutorialStep(
                title="Add Home Manager",
                body=("Add as a flake input:",),
                code="""inputs = {
  nixpkgs.url = "github:NixOS/nixpkgs/nixos-unstable";
  home-manager = {
    url = "github:nix-community/home-manager";
    inputs.nixpkgs.follows = "nixpkgs"; # share nixpkgs
  };
};

# In outputs modules list:
modules = [
  ./configuration.nix
  inputs.home-manager.nixosModules.home-manager
  {
    home-manager.useGlobalPkgs = true;
    home-manager.users.alice   = import ./home.nix;
  }
];""",
                tip="useGlobalPkgs prevents duplicate nixpkgs instances.",
            ),
        ),
    ),
    Tutorial(
        id="home-manager",
        icon="🏠",
        label="Home Manager Setup",
        difficulty=INTERMEDIATE,
        steps=(
            TutorialStep(
                title="What is Home Manager?",
                body=(
                    "Manages your user environment the Nix way: dotfiles,",
                    "user packages, shell config, fonts, GTK themes, services.",
                    "All declarative - rollback-safe with its own generations.",
                ),
                tip="Docs: nix-community.github.io/home-manager/",
            ),
            TutorialStep(
                title="Basic home.nix",
                code="""{ pkgs, ... }: {
  home.username      = "alice";
  home.homeDirectory = "/home/alice";
  home.stateVersion  = "24.11"; # set once, never change

  home.packages = with pkgs; [ ripgrep fd bat eza fzf delta ];

  programs.git = {
    enable    = true;
    userName  = "Alice";
    userEmail = "alice@example.com";
    delta.enable = true;
  };
}""",
                tip="stateVersion controls state migration paths - set it once and leave it.",
            ),
            TutorialStep(
                title="Shell Configuration",
                code="""programs.zsh = {
  enable = true;
  autosuggestion.enable  = true;   # was enableAutosuggestions pre-24.05
  syntaxHighlighting.enable = true;
  shellAliases = {
    ll      = "eza -la --git";
    cat     = "bat";
    rebuild = "sudo nixos-rebuild switch --flake /etc/nixos#";
  };
};

programs.starship = {   # cross-shell prompt
  enable = true;
  enableZshIntegration = true;
};""",
            ),
            TutorialStep(
                title="XDG & Dotfiles",
                body=("Manage dotfiles declaratively:",),
                code="""xdg.configFile."nvim/init.lua".source = ./nvim/init.lua;
xdg.configFile."kitty/kitty.conf".text = ''
  font_family JetBrains Mono
  font_size   13.0
'';

home.file.".ssh/config".text = ''
  Host github.com
    IdentityFile ~/.ssh/id_ed25519
    AddKeysToAgent yes
'';""",
                tip="home.file targets $HOME; xdg.configFile targets ~/.config.",
            ),
        ),
    ),
    Tutorial(
        id="nix-store",
        icon="🏗",
        label="Nix Store & GC",
        difficulty=INTERMEDIATE,
        steps=(
            TutorialStep(
                title="How the Nix Store Works",
                body=(
                    "Every package lives at /nix/store/<hash>-<n>-<ver>.",
                    "The hash encodes ALL build inputs - same inputs = same hash.",
                    "Multiple versions coexist; nothing ever conflicts.",
                    "Generations are symlinks pointing into the store.",
                ),
                tip="du -sh /nix/store shows total store disk usage.",
            ),
            TutorialStep(
                title="Generations & Rollback",
                code="""nixos-rebuild list-generations
nixos-rebuild switch --rollback       # undo last switch

# Home Manager:
home-manager generations
home-manager rollback

# Or select any generation from GRUB/systemd-boot menu""",
                tip="Keep 2-3 recent generations before running GC.",
            ),
            TutorialStep(
                title="Garbage Collection",
                code="""nix-collect-garbage          # remove unreachable paths
nix-collect-garbage -d       # + delete old generations
nix store optimise           # deduplicate with hard-links

# Declarative (recommended):
nix.gc = {
  automatic = true;
  dates     = "weekly";
  options   = "--delete-older-than 30d";
};
nix.optimise.automatic = true;""",
                tip="Always rebuild after manual GC to verify system roots still work.",
            ),
            TutorialStep(
                title="Inspecting Closures",
                code="""nix path-info -r $(which git)          # all deps of git
nix path-info -rS $(which firefox)     # closure with sizes
nix why-depends nixpkgs#firefox nixpkgs#openssl

# Diff two generations:
nix store diff-closures \\
  /nix/var/nix/profiles/system-40-link \\
  /nix/var/nix/profiles/system-41-link""",
            ),
        ),
    ),
    Tutorial(
        id="secrets",
        icon="🔑",
        label="Secrets Management",
        difficulty=ADVANCED,
        steps=(
            TutorialStep(
                title="The Problem",
                body=(
                    "The Nix store is world-readable - /nix/store is mode 555.",
                    "Any secret in a .nix file ends up in the store: visible to",
                    "every local user and in git history forever.",
                    "",
                    "Two community tools solve this: agenix and sops-nix.",
                ),
                tip="Never use environment.etc or literals in config for secrets.",
            ),
            TutorialStep(
                title="agenix - Age Encryption",
                code="""# flake.nix inputs:
inputs.agenix.url = "github:ryantm/agenix";

# configuration.nix:
imports = [ inputs.agenix.nixosModules.default ];
age.identityPaths = [ "/etc/ssh/ssh_host_ed25519_key" ];
age.secrets.dbPassword = {
  file  = ./secrets/dbPassword.age;
  owner = "postgres";
  mode  = "0400";
};
# Runtime: config.age.secrets.dbPassword.path""",
                tip="Edit: nix run github:ryantm/agenix -- -e secrets/file.age",
            ),
            TutorialStep(
                title="sops-nix - SOPS Integration",
                body=("Supports age, GPG, AWS/GCP/Azure KMS:",),
                code="""inputs.sops-nix.url = "github:Mic92/sops-nix";

sops = {
  defaultSopsFile = ./secrets/secrets.yaml;
  age.sshKeyPaths = [ "/etc/ssh/ssh_host_ed25519_key" ];
  secrets.apiKey  = {};
  secrets.certKey = { owner = "nginx"; };
};
# Runtime: config.sops.secrets.apiKey.path""",
                tip="sops-nix suits teams better - multiple key holders, easy rotation.",
            ),
            TutorialStep(
                title="Impermanence (Advanced)",
                body=("Opt-in persistence: / is a fresh tmpfs each reboot.",),
                code="""# Only listed paths survive reboot
environment.persistence."/persist" = {
  directories = [
    "/var/lib" "/var/log" "/etc/nixos"
    { directory = "/home/alice"; user = "alice"; }
  ];
  files = [
    "/etc/machine-id"
    "/etc/ssh/ssh_host_ed25519_key"
    "/etc/ssh/ssh_host_ed25519_key.pub"
  ];
};""",
                tip="Requires programs.fuse.enable = true for FUSE bind mounts.",
            ),
        ),
    ),
    Tutorial(
        id="debug",
        icon="🔍",
        label="Debugging NixOS",
        difficulty=ADVANCED,
        steps=(
            TutorialStep(
                title="Build & Eval Errors",
                code="""# Full trace:
nixos-rebuild switch --show-trace
nixos-rebuild switch --verbose

# Build log for a derivation:
nix log /nix/store/<hash>.drv

# Interactive eval:
nix repl
> :lf /etc/nixos      # load your flake
> nixosConfigurations.hostname.config.networking""",
                tip="Most errors are option name typos. Tab-complete in nix repl is invaluable.",
            ),
            TutorialStep(
                title="Systemd Service Failures",
                code="""systemctl --failed                  # all failed units
systemctl status <service>
journalctl -u <service> -f         # follow logs
journalctl -b -p err               # all errors this boot
journalctl --since "10 min ago"
systemctl cat <service>            # generated unit file""",
                tip="journalctl -xe gives a formatted error context on startup failures.",
            ),
            TutorialStep(
                title="Inspecting Options",
                code="""nixos-option networking.firewall.enable
nixos-option services.openssh      # list sub-options

# With flakes:
nix eval .#nixosConfigurations.hostname.config.networking.hostName""",
            ),
            TutorialStep(
                title="Package & Closure Debugging",
                code="""# Why is something in the closure?
nix why-depends /run/current-system nixpkgs#some-pkg

# Build a package standalone:
nix build nixpkgs#hello
nix build .#packages.x86_64-linux.myPkg

# Enter exact build environment:
nix develop nixpkgs#git
nix-shell -p python3 nodejs""",
                tip="nix develop drops you into the exact hermetic build env of any package.",
            ),
        ),
    ),
)


__all__ = [
    "ADVANCED",
    "BEGINNER",
    "INTERMEDIATE",
    "TUTORIALS",
    "Tutorial",
    "TutorialStep",
]
