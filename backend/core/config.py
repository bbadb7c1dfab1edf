"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Project
    PROJECT_NAME: str = "PID Regulation Simulator"
    VERSION: str = "0.1.0"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 2222
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    # Simulation
    MAX_SIMULATION_STEPS: int = 1_000_000

    # Point of connection (reference deployment)
    POC_INDUCTANCE: float = 2.8e-3    # H
    POC_CAPACITANCE: float = 0.0      # F
    POC_RESISTANCE: float = 0.0       # ohm
    POC_FREQUENCY: float = 50.0       # Hz
    POC_VOLTAGE: float = 6700.0       # V

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = [
        "http://localhost:8050",
        "http://localhost:2222",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def poc_params(self) -> dict:
        """Electrical plant parameters keyed like ElectricalReactivePowerPlant.DEFAULT_PARAMS."""
        return {
            "inductance": self.POC_INDUCTANCE,
            "capacitance": self.POC_CAPACITANCE,
            "resistance": self.POC_RESISTANCE,
            "frequency": self.POC_FREQUENCY,
            "u_poc": self.POC_VOLTAGE,
        }


settings = Settings()
