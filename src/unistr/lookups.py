import logging
import pandas as pd
import yaml
from functools import cached_property
from keyword import iskeyword
from dataclasses import fields
from typing import Dict, List
from unistr.connections import BooleanDataSource, DefaultsDataSource
from unistr.entities import SemanticVersion

logger = logging.getLogger(__name__)

class BooleanData(BooleanDataSource):
    def __init__(self):
        with self.csv_path.open('r', encoding='utf-8') as f:
            data = pd.read_csv(f, dtype={'token': str, 'value': int}, keep_default_na=False)
            for column in data.columns:
                if not iskeyword(column):
                    setattr(self, column, data[column])
        logger.debug("Loaded %d boolean tokens from %s", len(data), self.csv_path)

    @cached_property
    def token_to_value(self) -> Dict[str, bool]:
        return dict(zip(self.token, map(bool, self.value)))

    @cached_property
    def true_tokens(self) -> List[str]:
        return [token for token, value in self.token_to_value.items() if value]

    @cached_property
    def false_tokens(self) -> List[str]:
        return [token for token, value in self.token_to_value.items() if not value]

class DefaultsData(DefaultsDataSource):
    def __init__(self):
        with self.yaml_path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
            for section, values in data.items():
                if not iskeyword(section):
                    setattr(self, section, values)
        logger.debug("Loaded defaults sections %s from %s", sorted(data), self.yaml_path)

    @cached_property
    def truncation_trailing(self) -> str:
        return self.truncation['trailing']

    @cached_property
    def word_separators(self) -> List[str]:
        return list(self.words['separators'])

    @cached_property
    def version_separator(self) -> str:
        return self.semantic_version['separator']

    @cached_property
    def version_components(self) -> int:
        components = int(self.semantic_version['components'])
        expected = len(fields(SemanticVersion))
        if components != expected:
            raise ValueError(
                f'Semantic versions have {expected} components, but defaults specify {components}'
            )
        return components

    @cached_property
    def version_placeholder(self) -> str:
        return str(self.semantic_version['placeholder'])
