"""Stateful CHIP-8 interpreter for front ends.

The :class:`Interpreter` owns a single :class:`~chip8vm.state.EmulatorState`
and drives the functional core in :mod:`chip8vm.emulator`. A driving loop
typically calls :meth:`Interpreter.tick` a fixed number of times per frame,
then :meth:`Interpreter.tick_timers` once, then reads
:meth:`Interpreter.get_screen`. :meth:`Interpreter.run_frame` bundles these
first two steps.
"""

from typing import Optional, Sequence, Union

import jax
import numpy as np

from chip8vm import emulator
from chip8vm.constants import TICKS_PER_FRAME
from chip8vm.errors import Chip8Error
from chip8vm.logging import ConsoleLogger
from chip8vm.state import EmulatorState, create_state


class Interpreter:
    """CHIP-8 interpreter engine.

    Every operation computes the next state before storing it, so an operation
    that raises leaves the machine unchanged.
    """

    def __init__(self, seed: int = 0, logger: Optional[ConsoleLogger] = None):
        """Create an interpreter with zeroed state and the font installed.

        Args:
            seed: Seed of the PRNG key used by CXNN
            logger: Logger for engine events. Defaults to a WARNING-level
                ConsoleLogger.
        """
        self.seed = seed
        self.logger = logger or ConsoleLogger(name="chip8vm", log_level="WARNING")
        self._state = self._initial_state()

    def _initial_state(self) -> EmulatorState:
        return create_state(jax.random.PRNGKey(self.seed))

    @property
    def state(self) -> EmulatorState:
        """Current machine state."""
        return self._state

    @state.setter
    def state(self, state: EmulatorState):
        self._state = state

    def reset(self):
        """Restore the post-construction state."""
        self._state = self._initial_state()
        self.logger.info("Machine reset")

    def load(self, program: Union[bytes, bytearray, Sequence[int]]):
        """Copy a raw ROM image to 0x200 and set the program counter there."""
        try:
            self._state = emulator.load_program(self._state, program)
        except Chip8Error as e:
            self.logger.error(str(e))
            raise
        self.logger.info(f"Loaded {len(program)} byte program")

    def fetch(self) -> int:
        """Fetch the instruction word at the program counter and advance it."""
        self._state, instruction = emulator.fetch(self._state)
        return int(instruction)

    def execute(self, opcode: int):
        """Execute one instruction word against the current state."""
        if opcode == 0x0000:
            self.logger.debug("NOP")
        try:
            self._state = emulator.execute(self._state, opcode)
        except Chip8Error as e:
            self.logger.error(str(e))
            raise

    def tick(self):
        """Run one fetch/execute step."""
        try:
            self._state = emulator.step(self._state)
        except Chip8Error as e:
            self.logger.error(str(e))
            raise

    def tick_timers(self) -> bool:
        """Decrement the timers once.

        Returns:
            True when the sound timer went from 1 to 0 on this tick.
        """
        self._state, beep = emulator.tick_timers(self._state)
        if beep:
            self.logger.debug("Sound timer expired")
        return beep

    def run_frame(self, ticks: int = TICKS_PER_FRAME) -> bool:
        """Run ``ticks`` instruction steps followed by one timer tick."""
        for _ in range(ticks):
            self.tick()
        return self.tick_timers()

    def keypress(self, index: int, pressed: bool):
        """Set (``pressed=True``) or clear a key of the 16-key input latch."""
        try:
            self._state = emulator.press_key(self._state, index, pressed)
        except Chip8Error as e:
            self.logger.error(str(e))
            raise

    def get_screen(self) -> np.ndarray:
        """Read-only (32, 64) boolean snapshot of the display."""
        return emulator.get_screen(self._state)
