"""Process invocation and execution sequencing."""

from epithet.runner.base import BaseInvoker
from epithet.runner.local import LocalInvoker
from epithet.runner.sequencer import Sequencer, run_alias

__all__ = ["BaseInvoker", "LocalInvoker", "Sequencer", "run_alias"]
