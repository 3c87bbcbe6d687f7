from omegaconf import OmegaConf


def register_resolvers() -> None:
    OmegaConf.register_new_resolver("eval", eval, replace=True)
