"""Process entry shim: strip launcher arguments and forward the rest to create_v1_app.run."""

from launcher.shim import LAUNCHER_ARGC, ForwardResult, forward, strip_launcher_args

__all__ = ["LAUNCHER_ARGC", "ForwardResult", "forward", "strip_launcher_args"]
