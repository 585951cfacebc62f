import yaml
from BINSEARCHpy.io.input_parameters import LocateData


def get_input_from_yaml(yaml_file: str) -> dict:
    with open(yaml_file) as f:
        content = f.read()
        return yaml.safe_load(content) or {}


def load_locate_data_from_yaml(yaml_path: str) -> LocateData:
    """
    Load and validate locate input parameters from a YAML configuration file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML file containing an `input_locate` section.

    Returns
    -------
    LocateData
        Validated input parameters. A missing `input_locate` section leaves
        every field at its default, which fails validation since neither a
        sequence nor a datafile is given.
    """

    full_yaml = get_input_from_yaml(yaml_path)
    input_locate = full_yaml.get("input_locate") or {}
    return LocateData(filename=yaml_path, validate=True, **input_locate)
