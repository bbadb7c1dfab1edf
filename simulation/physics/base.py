"""Base plant interface for closed-loop simulations."""


class PlantModel:
    """
    Abstract base for plants driven by the simulation driver.

    Subclasses implement `step()`, which maps the controller output and the
    previous plant output to the next plant output. Plants hold parameters
    only; the driver threads the output from one step to the next.
    """

    name: str = "base"

    #: Output sample at t = 0.
    initial_output: float = 0.0

    def step(self, u: float, y_prev: float, dt: float) -> float:
        """
        Advance the plant by one step.

        Args:
            u: controller output applied during this step
            y_prev: plant output at the previous sample
            dt: time step in seconds

        Returns:
            plant output at the next sample
        """
        raise NotImplementedError

    def get_params(self) -> dict:
        return {"name": self.name, "initial_output": self.initial_output}
