"""Helper scripts installed into a workspace's bin directory."""

import logging
import os
import shlex

from ocenv.errors import SetupError
from ocenv.login import generate_login_command, has_login_command
from ocenv.models import Environment
from ocenv.workspace import ensure_directory

log = logging.getLogger(__name__)

SCRIPT_PERMISSIONS = 0o700

BROWSER_SCRIPT = """#!/bin/bash
# Port-forward a monitoring UI to localhost and open it.
set -euo pipefail

target="${{1:-prometheus}}"
case "$target" in
  prometheus)   svc=prometheus-k8s;    port=9090 ;;
  alertmanager) svc=alertmanager-main; port=9093 ;;
  thanos)       svc=thanos-querier;    port=9091 ;;
  *)
    echo "usage: ocb [prometheus|alertmanager|thanos] [local-port]" >&2
    exit 1
    ;;
esac
local_port="${{2:-$port}}"

oc -n openshift-monitoring port-forward "svc/${{svc}}" "${{local_port}}:${{port}}" >/dev/null 2>&1 &
echo "$!" >> {killpids}

url="http://localhost:${{local_port}}"
echo "Forwarding ${{svc}} to ${{url}}"
if command -v xdg-open >/dev/null 2>&1; then
  xdg-open "$url" >/dev/null 2>&1 || true
elif command -v open >/dev/null 2>&1; then
  open "$url" || true
fi
"""

DESCRIBE_SCRIPT = """#!/bin/bash
# Describe the cluster, or the given resource.
set -euo pipefail

if [ "$#" -eq 0 ]; then
  if [ -n "${CLUSTERID:-}" ]; then
    exec ocm describe cluster "$CLUSTERID"
  fi
  exec oc cluster-info
fi
exec oc describe "$@"
"""

PROMPT_SCRIPT = """#!/bin/bash
source "$(dirname "$0")/kube-ps1.sh"
_kube_ps1_render
"""

PROMPT_LIBRARY = """# Prompt segment with the current namespace and cluster.
_kube_ps1_render() {
  local cluster ns
  cluster=$(oc config view --minify --output 'jsonpath={.clusters[0].name}' 2>/dev/null) || cluster=""
  if [ -z "$cluster" ]; then
    printf 'N/A'
    return 0
  fi
  ns=$(oc config view --minify --output 'jsonpath={..namespace}' 2>/dev/null) || ns=""
  printf '%s@%s' "${ns:-default}" "${cluster%%:*}"
}
"""

LOGIN_SCRIPT = """#!/bin/bash
# Log into the cluster backing this environment.
{command}
"""


def bin_scripts(env: Environment) -> dict[str, str]:
    """Return the helper scripts for ``env``, keyed by file name."""
    scripts = {
        "ocb": BROWSER_SCRIPT.format(killpids=shlex.quote(str(env.killpids_file))),
        "ocd": DESCRIBE_SCRIPT,
        "kube_ps1": PROMPT_SCRIPT,
        "kube-ps1.sh": PROMPT_LIBRARY,
    }
    if has_login_command(env.credentials):
        scripts["ocl"] = LOGIN_SCRIPT.format(command=generate_login_command(env.credentials))
    return scripts


def create_bins(env: Environment) -> list[str]:
    """Write the helper scripts, replacing any earlier copies."""
    ensure_directory(env.bin_path)
    written = []
    for name, content in bin_scripts(env).items():
        path = env.bin_path / name
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(path, SCRIPT_PERMISSIONS)
        except OSError as e:
            raise SetupError(f"Could not write helper script {path}: {e}") from e
        written.append(name)
    log.debug("wrote %s into %s", ", ".join(sorted(written)), env.bin_path)
    return written
