"""
Config Manager

Loads an automata definition from YAML, validates it and wires it into an
AnimationAutomata.
"""

import yaml
from pathlib import Path
from typing import Optional, Union
from pydantic import ValidationError

from automata.engine.animation_automata import AnimationAutomata
from automata.managers.animation_manager import AnimationManager
from automata.models.config import AutomataSettings, StateRef
from automata.models.enums import LogCategory, LogLevel
from automata.models.errors import AnimationNotFoundError, ConfigError
from automata.models.transition import INT32_MAX, INT32_MIN
from automata.runtime.state_runner import StateRunner
from automata.utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Automata configuration manager

    Example config:
        logging:
          level: INFO
          colors: true
        states:
          HIDDEN: 0
          VISIBLE: 1
        initial_state: HIDDEN
        transitions:
          - from: HIDDEN
            to: VISIBLE
            animation: FADE_IN

    Example:
        config = ConfigManager("config/automata.yaml")
        config.load()

        automata = config.build(animations, target=panel)
        automata.goto_state(config.resolve_state("VISIBLE"))
    """

    def __init__(self, config_path: Union[str, Path] = "config/automata.yaml"):
        self.config_path = Path(config_path)
        self.settings: Optional[AutomataSettings] = None

    def load(self) -> AutomataSettings:
        """
        Read, parse and validate the YAML file

        Applies the logging section to the logger singleton.

        Raises:
            ConfigError: File missing, not valid YAML, or failing validation
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            log.error("Config file not found", path=str(self.config_path))
            raise ConfigError(f"Config file not found: {self.config_path}",
                              {"path": str(self.config_path)})
        except OSError as ex:
            log.error("Config file could not be read", path=str(self.config_path), exception=ex)
            raise ConfigError(f"Cannot read config file {self.config_path}: {ex}",
                              {"path": str(self.config_path)}) from ex
        except yaml.YAMLError as ex:
            log.error("Config file is not valid YAML", path=str(self.config_path), exception=ex)
            raise ConfigError(f"Invalid YAML in {self.config_path}: {ex}",
                              {"path": str(self.config_path)}) from ex

        return self.load_dict(data or {})

    def load_dict(self, data: dict) -> AutomataSettings:
        """Validate an already parsed config mapping"""
        try:
            settings = AutomataSettings.model_validate(data)
        except ValidationError as ex:
            errors = [
                f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}"
                for err in ex.errors()
            ]
            log.error("Config validation failed", details=errors)
            raise ConfigError("Config validation failed", {"errors": errors}) from ex

        self.settings = settings
        configure_logger(
            min_level=LogLevel[settings.logging.level],
            use_colors=settings.logging.colors,
            stream=get_logger().stream
        )
        for entry in settings.transitions:
            self.resolve_state(entry.from_state)
            self.resolve_state(entry.to_state)
        if settings.initial_state is not None:
            self.resolve_state(settings.initial_state)

        log.info(
            "Config loaded",
            states=len(settings.states),
            transitions=len(settings.transitions)
        )
        return settings

    def _require_settings(self) -> AutomataSettings:
        if self.settings is None:
            raise ConfigError("Config not loaded; call load() first")
        return self.settings

    def resolve_state(self, ref: StateRef) -> int:
        """
        Map a state name (or raw identifier) to its identifier

        Raises:
            ConfigError: Unknown state name, or identifier outside int32
        """
        if isinstance(ref, int):
            if not INT32_MIN <= ref <= INT32_MAX:
                raise ConfigError(f"State identifier {ref} is outside int32 range", {"state": ref})
            return ref
        states = self._require_settings().states
        if ref not in states:
            raise ConfigError(f"Unknown state '{ref}'", {"state": ref, "known": list(states)})
        return states[ref]

    def initial_state(self) -> int:
        settings = self._require_settings()
        if settings.initial_state is None:
            return 0
        return self.resolve_state(settings.initial_state)

    def apply(self, automata: AnimationAutomata, animations: AnimationManager) -> int:
        """
        Register one fresh animation per configured transition

        Returns:
            Number of transitions registered

        Raises:
            ConfigError: Transition refers to an unknown state or animation
        """
        settings = self._require_settings()
        for entry in settings.transitions:
            before = self.resolve_state(entry.from_state)
            after = self.resolve_state(entry.to_state)
            try:
                animation = animations.create(entry.animation)
            except AnimationNotFoundError as ex:
                raise ConfigError(
                    f"Transition {entry.from_state} → {entry.to_state} uses unknown animation '{entry.animation}'",
                    {"animation": entry.animation, "known": animations.names()}
                ) from ex
            automata.register_animation(before, after, animation)
            log.debug("Transition registered", transition=f"{before} → {after}", animation=entry.animation)

        return len(settings.transitions)

    def build(self, animations: AnimationManager, target=None) -> AnimationAutomata:
        """
        Create a StateRunner in the initial state, wrap it and subscribe the automata

        Returns:
            Configured AnimationAutomata (target bound when given)
        """
        runner = StateRunner(initial=self.initial_state())
        automata = AnimationAutomata.refer(runner)
        if target is not None:
            automata.bind_target(target)
        self.apply(automata, animations)
        runner.add_sublevel(automata)
        return automata
