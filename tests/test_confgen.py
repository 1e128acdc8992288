"""Tests for configuration.nix generation from option values."""

from __future__ import annotations

import unittest

from nixtui.catalog import default_values
from nixtui.confgen import generate_config, nix_literal


def _values(**overrides):
    values = dict(default_values())
    values.update({key.replace("__", "."): value for key, value in overrides.items()})
    return values


class NixLiteralTests(unittest.TestCase):
    def test_scalars(self) -> None:
        self.assertEqual(nix_literal(True), "true")
        self.assertEqual(nix_literal(False), "false")
        self.assertEqual(nix_literal(30.0), "30")
        self.assertEqual(nix_literal(2.5), "2.5")
        self.assertEqual(nix_literal(None), "null")
        self.assertEqual(nix_literal("x"), "x")


class GenerateConfigTests(unittest.TestCase):
    def test_default_document_shape(self) -> None:
        lines = generate_config(default_values())
        self.assertEqual(lines[0], "# Auto-generated by nixtui")
        self.assertEqual(lines[-1], "}")
        self.assertIn('  networking.hostName = "nixos";', lines)
        self.assertIn("  users.users.alice = {", lines)
        self.assertTrue(any('system.stateVersion = "24.11";' in line for line in lines))

    def test_is_pure(self) -> None:
        values = default_values()
        self.assertEqual(generate_config(values), generate_config(values))

    def test_ssh_block_uses_port(self) -> None:
        lines = generate_config(_values(network__ssh=True, network__sshPort=2222))
        self.assertIn("    ports  = [ 2222 ];", lines)
        self.assertIn("  networking.firewall.allowedTCPPorts = [ 2222 ];", lines)

    def test_optional_sections_follow_flags(self) -> None:
        without = generate_config(_values(system__gc=False))
        self.assertFalse(any("nix.gc" in line for line in without))
        with_gc = generate_config(_values(system__gc=True, system__gcDays=7))
        self.assertTrue(any("--delete-older-than 7d" in line for line in with_gc))

    def test_user_name_flows_into_user_block(self) -> None:
        lines = generate_config(_values(user__username="bob", user__shell="zsh"))
        self.assertIn("  users.users.bob = {", lines)
        self.assertIn("    shell         = pkgs.zsh;", lines)


if __name__ == "__main__":
    unittest.main()
