"""
Config Tools
    A small set of tools to define the solver options in YAML files and override them from the command line.

The features:
    1- Config classes are dataclasses decorated with 'config'. In a YAML file, they are written
       using the tag '!obj:<module_path>/<class_path>' followed by a mapping of their fields.
    2- Configs can be nested (a config field can hold another config object).
    3- Multiple config files can be merged, so a file can change a few options of another one.
    4- A config file can include another one using '!inc <path>'.
    5- Any field can be overridden from the command line using '-ovr path=value'. The value is read as
       YAML when the field does not hold a string, so '-ovr steps=false' turns a flag off.

***********************
** Custom YAML tags ***
***********************

- '!inc <path>':            The path string will be replaced by the config at the given path.
                            If the path starts with '~/', it is relative to the including file.
- '!obj:<module_path>/<class_path> <mapping>':
                            This will instantiate the class defined by <module_path>.<class_path>
                            and fill its fields using the mapping. Missing fields keep their default values.

*******************
*** An Example: ***
*******************

File "ascii.yml"
>>> !obj:mazes/SolverConfig
>>> steps: true
>>> glyphs: !obj:mazes.render/GlyphConfig
>>>     wall: 'X'
>>>     path: '*'

> python cli.py solve -i maze.txt -cfg ascii.yml -ovr glyphs.open=" "
"""

from typing import Any, Dict, List, Optional
import yaml
import dataclasses
import pathlib
import argparse

class ConfigError(ValueError):
    """Raised when a config file or an override does not match the config classes.
    """
    pass

###################################
# Merge two or more configuations #
###################################

__CONFIG_ATTR = "__config_metadata"     # A class attribute storing info in Config classes
__CONFIG_OVERRIDE_ATTR = "__config_ovr" # An instance attribute storing which fields were set by the config loader.

# Internal function that merges two objects and returns the merged object.
def __merge_two(obj1, obj2):
    if type(obj1) != type(obj2):
        return obj2

    if isinstance(obj1, dict):
        for name, value in obj2.items():
            obj1[name] = __merge_two(obj1[name], value) if name in obj1 else value
        return obj1

    if not hasattr(obj1, __CONFIG_ATTR) or not getattr(obj1, __CONFIG_ATTR).get("merge", False):
        return obj2

    # Only the fields that were explicitly written in the second file replace the ones in the first.
    obj1_ovr = getattr(obj1, __CONFIG_OVERRIDE_ATTR, set())
    obj2_ovr = getattr(obj2, __CONFIG_OVERRIDE_ATTR, set())
    for f in dataclasses.fields(obj1):
        if f.name not in obj2_ovr: continue
        v2 = getattr(obj2, f.name)
        if f.name in obj1_ovr:
            v2 = __merge_two(getattr(obj1, f.name), v2)
        setattr(obj1, f.name, v2)
        obj1_ovr.add(f.name)
    setattr(obj1, __CONFIG_OVERRIDE_ATTR, obj1_ovr)
    return obj1

def merge(*objs):
    """Merges two or more objects into the first one and returns it.
    WARNING: This function could modify the first object.

    - Objects of different types are not merged; the latter wins.
    - Dictionaries are merged key by key.
    - Config objects are merged field by field, where a field from a later object only
      replaces the earlier value if it was written explicitly in the config file.
    - Anything else is replaced by the latter object.
    """
    obj = objs[0]
    for other in objs[1:]:
        obj = __merge_two(obj, other)
    return obj

############################################################################################
# A decorator to automatically register a class representer and add configuration metadata #
############################################################################################

__OBJ_TAG = "!obj:"

def config(cls=None, /, *, merge=True):
    """A decorator for config classes. The class must be a dataclass.

    Parameters
    ----------
    cls : dataclass, optional
        The class to be decorated. If None, this function will return a decorator. (default: None)
    merge : bool, optional
        if True, the class instances will be merged field by field when sent to 'merge'. (default: True)
    """
    def wrap(cls):
        assert dataclasses.is_dataclass(cls), "a configuration class must be a dataclass"
        tag = f'{__OBJ_TAG}{cls.__module__}/{cls.__qualname__}'
        def representer(dumper: yaml.Dumper, obj):
            mapping = {field.name: getattr(obj, field.name) for field in dataclasses.fields(obj)}
            return dumper.represent_mapping(tag, mapping)
        yaml.add_representer(cls, representer)
        setattr(cls, __CONFIG_ATTR, {"merge": merge})
        return cls

    if cls is None:
        return wrap
    else:
        return wrap(cls)

################################################################
# Constructors for special tags (e.g. Objects, Includes, etc.) #
################################################################

def __obj_cons(loader: yaml.Loader, suffix: str, node: yaml.Node):
    import importlib
    module_name, class_name = suffix.split('/')
    cls = importlib.import_module(module_name)
    for name in class_name.split('.'):
        cls = getattr(cls, name)
    data = loader.construct_mapping(node, deep=True)
    names = {f.name for f in dataclasses.fields(cls) if f.init}
    unknown = set(data) - names
    if unknown:
        raise ConfigError(f"Unknown fields for {cls.__qualname__}: {', '.join(sorted(unknown))}")
    obj = cls(**data)
    setattr(obj, __CONFIG_OVERRIDE_ATTR, set(data))
    return obj

def __inc_cons(loader: yaml.Loader, node: yaml.Node):
    url: str = loader.construct_python_str(node).strip()
    if url.startswith("~/") or url.startswith("~\\"):
        url = url[2:].strip()
        stream_url = getattr(loader.stream, "name", None)
        if stream_url is not None:
            url = str(pathlib.Path(stream_url).parent.joinpath(url))
    return read_config(url)

################################################
# Update An Object with Nested-Key Value Pairs #
################################################

# Internal function: a string given for a field that does not hold a string is read as YAML (e.g. "false" -> False).
def __coerce(current, value):
    if not isinstance(value, str) or current is None or isinstance(current, str):
        return value
    parsed = __parse_yaml(value)
    if isinstance(current, bool) and not isinstance(parsed, bool):
        raise ConfigError(f"Expected a boolean, got '{value}'")
    return parsed

def __parse_yaml(value: str):
    try:
        return yaml.safe_load(value)
    except yaml.YAMLError as error:
        raise ConfigError(f"Cannot read '{value}': {error}") from error

def __update_object(obj, keys: List[str], value):
    if len(keys) == 0: return __coerce(obj, value)
    if obj is None: return value
    top = keys[0]
    if isinstance(obj, list):
        assert top.isdigit(), "a list accessor must be a number"
        index = int(top)
        obj[index] = __update_object(obj[index], keys[1:], value)
    elif isinstance(obj, dict):
        obj[top] = __update_object(obj.get(top), keys[1:], value)
    elif hasattr(obj, top):
        setattr(obj, top, __update_object(getattr(obj, top), keys[1:], value))
    else:
        raise ConfigError(f"{type(obj).__name__} has no field '{top}'")
    return obj

def update_object(obj, updates: Dict[str, Any]):
    """Update an object using a dictionary of paths and values.
    A path such as 'glyphs.wall' reaches 'obj.glyphs.wall' (or 'obj["glyphs"]["wall"]' for dictionaries).
    WARNING: The object could be modified.

    Parameters
    ----------
    obj : Any
        The object to update.
    updates : Dict[str, Any]
        A dictionary of paths and values.

    Returns
    -------
    Any
        The object after it is updated.
    """
    for key, value in updates.items():
        obj = __update_object(obj, key.split('.'), value)
    return obj

#################################################
# Argument Parsing For Configuration Management #
#################################################

def add_config_arguments(parser: argparse.ArgumentParser, config_file_args = None, override_args = None):
    """Add arguments to read a config from the user via the CLI.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The parser to which the config arguments will be added.
    config_file_args : Optional[List[str]], optional
        The flags used to define the config files. If None, it will be ['-cfg', '--config']. (default: None)
    override_args : Optional[List[str]], optional
        The flags used to define the overrides. If None, it will be ['-ovr', '--override']. (default: None)
        Each override is written as 'path=value' or 'path:=value'. In the second form, the value
        is always read as YAML (e.g. a number, a boolean or a list). In the first form, it is
        kept as a string unless the overridden field holds something else.
    """
    config_file_args = config_file_args or ['-cfg', '--config']
    override_args = override_args or ['-ovr', '--override']
    parser.add_argument(*config_file_args, dest="config", nargs='+', default=[], help="one or more config files to merge")
    parser.add_argument(*override_args, dest="override", nargs='*', default=None, help="overrides in the form path=value or path:=yaml")

def parse_overrides(overrides: List[str]) -> Dict[str, Any]:
    updates = {}
    for override in overrides:
        if '=' not in override:
            raise ConfigError(f"Expected an override in the form path=value, got '{override}'")
        key, value = override.split('=', 1)
        if key.endswith(':'):
            key = key[:-1]
            value = __parse_yaml(value)
        updates[key.strip()] = value
    return updates

def get_config_from_namespace(args: argparse.Namespace, default: Optional[Any] = None):
    """Get the config object as defined by the user via the CLI.

    Parameters
    ----------
    args : argparse.Namespace
        The namespace returned by the parser.
    default : Optional[Any], optional
        The config to use when no config files are given. (default: None)

    Returns
    -------
    Any
        The config files merged together (or the default), after applying the overrides.
    """
    config = read_config(*args.config) if args.config else default
    if config is None:
        config = {}
    if args.override:
        config = update_object(config, parse_overrides(args.override))
    return config

###########################
# Read Configuration File #
###########################

def read_config(*paths):
    """Read one or more config files, then merge them.
    If any file contains multiple documents, they are merged too.

    Parameters
    ----------
    *paths : str
        Paths to config files.

    Returns
    -------
    Any
        The merged config (or an empty dictionary if the files are empty).
    """
    config = []
    for path in paths:
        with open(path, 'r') as stream:
            loader = yaml.UnsafeLoader(stream)
            loader.add_constructor("!inc", __inc_cons)
            loader.add_multi_constructor(__OBJ_TAG, __obj_cons)
            try:
                while loader.check_data():
                    config.append(loader.get_data())
            finally:
                loader.dispose()
    if config:
        return merge(*config)
    else:
        return {}
