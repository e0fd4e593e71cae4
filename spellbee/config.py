from __future__ import annotations
import os
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = 'SPELLBEE_'


class Settings(BaseModel):
    dictionary_path: Path = Path('data/dict.txt')
    data_dir: Path = Path('data')
    max_reported_words: int = Field(1000, gt=0)
    generation_attempts: int = Field(10, gt=0)
    default_min_length: int = Field(4, gt=0)
    random_seed: Optional[int] = None
    cors_origins: List[str] = ['*']
    host: str = '0.0.0.0'
    port: int = 8000
    log_level: str = 'INFO'

    @property
    def add_reports_path(self) -> Path:
        return self.data_dir / 'reported_add.txt'

    @property
    def remove_reports_path(self) -> Path:
        return self.data_dir / 'reported_remove.txt'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from ``SPELLBEE_*`` variables, falling back to defaults.

        ``HOST`` and ``PORT`` are read without the prefix, matching what most
        hosting platforms inject.
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        for name in ('dictionary_path', 'data_dir', 'max_reported_words',
                     'generation_attempts', 'default_min_length', 'random_seed', 'log_level'):
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip():
                values[name] = raw.strip()
        origins = env.get(ENV_PREFIX + 'CORS_ORIGINS')
        if origins:
            values['cors_origins'] = [o.strip() for o in origins.split(',') if o.strip()]
        if env.get('HOST'):
            values['host'] = env['HOST']
        if env.get('PORT'):
            values['port'] = env['PORT']
        return cls.model_validate(values)
