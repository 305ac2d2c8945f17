import os
from typing import Type, TypeVar

import yaml
from pydantic import BaseModel

T = TypeVar("T", bound="BaseDeployment")


class BaseDeployment(BaseModel):
    """Pydantic model that can be written to and read from a YAML file."""

    def get_deployment(self) -> str:
        return yaml.safe_dump(self.model_dump(mode="json", exclude_none=True), sort_keys=False)

    def write_deployment(self, filename: str) -> None:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filename, "w") as file:
            file.write(self.get_deployment())


class DeploymentFactory:

    @staticmethod
    def read_deployment_from_string(classname: Type[T], yamlstring: str) -> T:
        return classname(**(yaml.safe_load(yamlstring) or {}))

    @staticmethod
    def read_deployment_from_file(classname: Type[T], filename: str) -> T:
        with open(filename, "r") as file:
            return DeploymentFactory.read_deployment_from_string(classname, file.read())
