"""Run the oc or kubectl CLI to read cluster resources.

This is the alternative to the API client for hosts where only a logged-in
CLI is available. The tool's own configuration (``oc login``, KUBECONFIG)
is used unless a kubeconfig path or context is set explicitly.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from cluster_platform.utils.errors import InvocationError

logger = logging.getLogger(__name__)

# Prefer oc over kubectl since the resource is OpenShift-specific
CLI_CANDIDATES = ("oc", "kubectl")


class ClusterCLI:
    """Invokes ``oc``/``kubectl`` and returns its captured output."""

    def __init__(
        self,
        cli_path: str | None = None,
        kubeconfig: str | None = None,
        context: str | None = None,
    ) -> None:
        self._cli_path = cli_path
        self._kubeconfig = kubeconfig
        self._context = context

    def find_cli(self) -> str:
        """Find the CLI to run.

        An explicitly configured path is returned as-is; a bad path is
        reported when it fails to start.

        Raises:
            InvocationError: If no path is configured and neither oc nor
                kubectl is found in PATH.
        """
        if self._cli_path is not None:
            return self._cli_path

        for cli in CLI_CANDIDATES:
            path = shutil.which(cli)
            if path:
                logger.debug(f"Found CLI: {path}")
                self._cli_path = path
                return path

        raise InvocationError(
            "Neither 'oc' nor 'kubectl' found in PATH. "
            "Please install the OpenShift CLI (oc) or Kubernetes CLI (kubectl)."
        )

    def build_command(self, kind: str, name: str) -> list[str]:
        """Build the ``get <kind> <name> -o yaml`` command line."""
        cmd = [self.find_cli(), "get", kind, name, "-o", "yaml"]
        if self._kubeconfig:
            cmd.extend(["--kubeconfig", self._kubeconfig])
        if self._context:
            cmd.extend(["--context", self._context])
        return cmd

    def get_yaml(self, kind: str, name: str) -> str:
        """Run ``get <kind> <name> -o yaml`` and return stdout and stderr combined.

        Raises:
            InvocationError: If the tool cannot be started or exits non-zero.
                The captured output is attached to the error.
        """
        cmd = self.build_command(kind, name)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            raise InvocationError(f"Failed to run {cmd[0]}: {e}") from e

        output = result.stdout or ""
        if result.returncode != 0:
            detail = output.strip() or "no output"
            raise InvocationError(
                f"'{' '.join(cmd)}' exited with status {result.returncode}: {detail}",
                output=output,
                returncode=result.returncode,
            )

        return output
