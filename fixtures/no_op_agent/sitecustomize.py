"""No-op auto-instrumentation agent.

Put this directory on PYTHONPATH and the interpreter imports it at startup,
before the probe runs. It does nothing but set the markers the probe checks.
"""

from probes.markers import JVM_AGENT_MARKER, NODEJS_AGENT_MARKER, set_marker

set_marker(NODEJS_AGENT_MARKER, "true")
set_marker(JVM_AGENT_MARKER, "true")
