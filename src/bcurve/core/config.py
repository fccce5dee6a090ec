from typing import *

import os
import yaml

from yamlinclude import YamlIncludeConstructor


class YamlLimitedSafeLoader(type):
    """Meta YAML loader that skips the resolution of the specified YAML tags."""
    def __new__(cls, name, bases, namespace, do_not_resolve: List[str]) -> Type[yaml.SafeLoader]:
        do_not_resolve = set(do_not_resolve)
        implicit_resolvers = {
            key: [(tag, regex) for tag, regex in mappings if tag not in do_not_resolve]
            for key, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
        }
        return super().__new__(
            cls,
            name,
            (yaml.SafeLoader, *bases),
            {**namespace, "yaml_implicit_resolvers": implicit_resolvers},
        )


class YamlNoTimestampSafeLoader(
    metaclass=YamlLimitedSafeLoader, do_not_resolve={"tag:yaml.org,2002:timestamp"}
):
    """A safe YAML loader that leaves timestamps as strings."""
    pass


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            items = ((k, cls.create(v)) for k, v in cfg.items())
            return dotdict(items)
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([cls.create(i) for i in cfg])
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        if isinstance(cfg, (dict, dotdict)):
            return {k: dotdict.serialize(v) for k, v in cfg.items()}
        elif isinstance(cfg, list):
            return [dotdict.serialize(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return [dotdict.serialize(i) for i in cfg]
        else:
            return cfg


def load_config(path):
    """
    Load engine configuration from given YAML file, replace dictionaries by dotdict.
    Other files can be included, relative to the directory of 'path':
        bspline: !include bspline_engine.yaml
    """
    cfg_dir = os.path.dirname(path)
    YamlIncludeConstructor.add_to_loader_class(loader_class=YamlNoTimestampSafeLoader, base_dir=cfg_dir)
    with open(path) as f:
        cfg = yaml.load(f, Loader=YamlNoTimestampSafeLoader)
    if cfg is None:
        cfg = {}
    cfg['_config_root_dir'] = os.path.abspath(cfg_dir)
    return dotdict.create(cfg)


def dump_config(config, path="__config_resolved.yaml"):
    with open(path, "w") as f:
        yaml.safe_dump(dotdict.serialize(config), f)
