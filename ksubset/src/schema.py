#!/usr/bin/env python

"""Serializable class objects for storing project data.

A Project records a subset space (n, k) and the state of the random
number generator used to sample from it, so that sampling can be
continued across runs.
"""

from pathlib import Path
from pydantic import BaseModel, field_validator, model_validator, computed_field
import numpy as np
from ksubset.src.binomial import binomial
from ksubset.src.ksubset import KSubset
from ksubset.src.utils import ArithmeticOverflowError


class RNGStateModel(BaseModel):
    bit_generator: str
    state: dict

    @staticmethod
    def from_rng(rng: np.random.Generator) -> "RNGStateModel":
        """Create an RNGStateModel from a NumPy Generator."""
        return RNGStateModel(
            bit_generator=rng.bit_generator.__class__.__name__,
            state=rng.bit_generator.state
        )

    def to_rng(self) -> np.random.Generator:
        """Restore a NumPy Generator from the RNGStateModel."""
        bitgen = getattr(np.random, self.bit_generator)()
        bitgen.state = self.state
        return np.random.Generator(bitgen)


class Project(BaseModel):
    """A named subset space with checkpointed random sampling state."""
    version: str

    # inputs by user
    name: str
    workdir: Path
    n: int
    k: int
    random_seed: int | None = None

    # checkpointing
    nsampled: int = 0
    rng_state: RNGStateModel | None = None

    @field_validator("workdir", mode="after")
    @classmethod
    def validate_workdir(cls, value: Path | str) -> Path:
        value = Path(value).expanduser().resolve()
        value.mkdir(parents=True, exist_ok=True)
        return value

    @model_validator(mode="after")
    def validate_space(self) -> "Project":
        if self.n < 0 or self.k < 0 or self.n < self.k:
            raise ValueError(f"require 0 <= k <= n, got n={self.n}, k={self.k}")
        try:
            binomial(self.n, self.k)
        except ArithmeticOverflowError as exc:
            raise ValueError(f"C({self.n}, {self.k}) is not representable") from exc
        return self

    @computed_field
    def json_file(self) -> Path:
        return self.workdir / f"{self.name}.json"

    @computed_field
    def samples_file(self) -> Path:
        return self.workdir / f"{self.name}.samples.tsv"

    def __str__(self):
        return self.model_dump_json(indent=2)

    def ksubset(self) -> KSubset:
        """Return the KSubset of this project's (n, k)."""
        return KSubset(self.n, self.k)

    def get_rng(self) -> np.random.Generator:
        """Return the checkpointed Generator, or a new one from random_seed."""
        if self.rng_state is not None:
            return self.rng_state.to_rng()
        return np.random.default_rng(self.random_seed)

    def save_json(self) -> None:
        """Write object serialized to JSON"""
        with open(self.json_file, 'w') as out:
            json = self.model_dump_json(indent=2)
            out.write(json)

    @classmethod
    def load_json(cls, json_file: Path) -> "Project":
        """Load a Project from its serialized JSON file."""
        with open(json_file, 'r') as indata:
            return cls.model_validate_json(indata.read())


if __name__ == "__main__":

    proj = Project(
        version="0.1",
        name="TEST",
        workdir="/tmp",
        n=20,
        k=4,
    )

    rng = np.random.default_rng(123)
    x = rng.integers(0, 100)
    proj.rng_state = RNGStateModel.from_rng(rng)
    print(proj)
    rng = proj.rng_state.to_rng()
    print(rng)
