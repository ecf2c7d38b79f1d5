"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory, then the project root.
Missing sections and keys fall back to the dataclass defaults.
"""
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict


@dataclass
class GameConfig:
    """Game rules configuration."""
    grid_width: int = 20
    grid_height: int = 20
    initial_length: int = 3
    tick_ms: int = 100
    seed: Optional[int] = None
    allow_tail_chase: bool = True

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_ms / 1000.0


@dataclass
class VisualizationConfig:
    """Visualization settings."""
    cell_size: int = 25
    title: str = "Snake"
    show_score: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> "Config":
        """Raise ValueError on settings the game cannot run with."""
        if self.game.grid_width < 1 or self.game.grid_height < 1:
            raise ValueError(
                f"Grid must be at least 1x1, got "
                f"{self.game.grid_width}x{self.game.grid_height}"
            )
        if self.game.initial_length < 1:
            raise ValueError(f"initial_length must be at least 1, got {self.game.initial_length}")
        if self.game.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.game.tick_ms}")
        if self.visualization.cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {self.visualization.cell_size}")
        return self


SECTIONS = {
    'game': GameConfig,
    'visualization': VisualizationConfig,
    'logging': LoggingConfig,
}


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


PROJECT_CONFIG = Path(__file__).parent.parent.parent / "config.yaml"


def find_config_file() -> Optional[Path]:
    """Find config.yaml in the usual places."""
    possible_paths = [
        Path.cwd() / "config.yaml",
        PROJECT_CONFIG,
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml lookup)

    Returns:
        Validated Config object with all settings
    """
    path = Path(config_path) if config_path else find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not data:
        return Config()
    if not isinstance(data, dict):
        print(f"[Config] {path} is not a mapping, using defaults")
        return Config()

    config = Config()
    for section, cls in SECTIONS.items():
        if section in data:
            setattr(config, section, _dict_to_dataclass(data[section], cls))

    return config.validate()


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
