"""No-op startup hook; signals that it ran through an environment variable."""

import os

os.environ["otel_injector_dotnet_no_op_startup_hook_has_been_loaded"] = "true"
