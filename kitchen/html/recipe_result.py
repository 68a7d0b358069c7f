from jinja2 import Environment
from markupsafe import Markup

from kitchen.domain.models import ErrorKind, GenerationError, GenerationResult, Recipe


class RecipeResult:
    def __init__(
        self,
        result: GenerationResult | None,
        *,
        environment: Environment,
        template_name: str = "recipe-result.html",
    ) -> None:
        self.result = result
        self.env = environment
        self.name = template_name

    @property
    def ok(self) -> bool:
        return isinstance(self.result, Recipe)

    @property
    def content(self) -> Markup | None:
        # Provider markup is embedded as is.
        if isinstance(self.result, Recipe):
            return Markup(self.result.html)
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self.result, GenerationError):
            return self.result.message
        return None

    @property
    def hint(self) -> str | None:
        if (
            isinstance(self.result, GenerationError)
            and self.result.kind is ErrorKind.missing_credential
        ):
            return "Set OPENAI_API_KEY in the environment or in a .env file."
        return None

    def render(self) -> str:
        if self.result is None:
            return ""
        return self.env.get_template(self.name).render(result=self)
