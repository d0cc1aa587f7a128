"""FakeCommandRunner: test double for CommandRunner.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""


class FakeCommandRunner:
    """Records invocations instead of starting processes.

    Usage:
        fake = FakeCommandRunner()
        fake.fail_on("shadcn init", ProcessExitError("shadcn init", 1))
        fake.run(invocation)
        assert fake.labels == ["create-next-app"]
    """

    def __init__(self):
        self.invocations = []
        self._failures = {}
        self._side_effects = {}

    def fail_on(self, label, error):
        self._failures[label] = error

    def on_run(self, label, fn):
        self._side_effects[label] = fn

    @property
    def labels(self):
        return [invocation.display_label for invocation in self.invocations]

    def run(self, invocation):
        self.invocations.append(invocation)
        if invocation.display_label in self._side_effects:
            self._side_effects[invocation.display_label](invocation)
        if invocation.display_label in self._failures:
            raise self._failures[invocation.display_label]
