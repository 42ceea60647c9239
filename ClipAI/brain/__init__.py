from .errors import AIError, EmptyResponse, HTTPError, InvalidEndpoint, MissingCredential, TransportError
from .profiles import AIConfig, AspectRatio, ImageSize, OutputType, ProfileStore, default_profile
from .request_builder import PreparedRequest, build_request
from .response_decoder import AIResult, decode_response
from .llm import AIService, generate
