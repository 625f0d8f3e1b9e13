from .renderer import Renderer, AlreadyRenderedError
from .options import Options, ConfigError
from .to_xml import to_xml
