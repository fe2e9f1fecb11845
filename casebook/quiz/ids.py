"""
Identifier policies for parsed steps and options.

PositionalIds – deterministic (step_0, s0_opt1); used for clinical case steps,
where each option carries its own `correct` flag.
RandomIds – opaque uuid hex tokens; used for inscription tests, which point to
the right answer through a single `correctId`.
"""
import uuid


class PositionalIds:
    name = 'positional'

    def step_id(self, step_index):
        return f"step_{step_index}"

    def option_id(self, step_index, option_index):
        return f"s{step_index}_opt{option_index}"


class RandomIds:
    name = 'random'

    def step_id(self, step_index):
        return uuid.uuid4().hex

    def option_id(self, step_index, option_index):
        return uuid.uuid4().hex


POSITIONAL = PositionalIds()
