"""Resolve project options from stored defaults, asking only where configured."""

from dataclasses import dataclass

from nextplus.errors import ValidationError
from nextplus.prompts import CANCELLED, Resolved, ask_text, choose, is_cancelled

YES = "Yes"
NO = "No"
EMPTY_ALIAS_MESSAGE = "Import alias cannot be empty"


@dataclass(frozen=True)
class ProjectOptions:
    """Every choice that parameterizes one create-next-app invocation."""

    use_typescript: bool
    include_tailwind: bool
    include_eslint: bool
    use_app_router: bool
    use_src_directory: bool
    enable_experimental_app: bool
    enable_turbopack: bool
    enable_react_compiler: bool
    import_alias: str
    init_shadcn: bool
    install_all_shadcn_components: bool

    @property
    def wants_component_setup(self) -> bool:
        return self.init_shadcn or self.install_all_shadcn_components


@dataclass(frozen=True)
class BooleanOption:
    field_name: str
    setting_key: str
    prompt_key: str
    message: str
    enable_description: str
    disable_description: str


@dataclass(frozen=True)
class TextOption:
    field_name: str
    setting_key: str
    prompt_key: str
    message: str


OPTIONS = (
    BooleanOption(
        "use_typescript", "typescript", "typescript_prompt",
        "Enable TypeScript?",
        "Adds TypeScript configuration and types.",
        "Generates the project without TypeScript support.",
    ),
    BooleanOption(
        "include_tailwind", "tailwind", "tailwind_prompt",
        "Include Tailwind CSS?",
        "Installs Tailwind CSS and adds starter config.",
        "Skips Tailwind CSS setup.",
    ),
    BooleanOption(
        "include_eslint", "eslint", "eslint_prompt",
        "Add ESLint?",
        "Configures ESLint with Next.js defaults.",
        "Skips ESLint setup.",
    ),
    BooleanOption(
        "use_app_router", "app_router", "app_router_prompt",
        "Use the App Router (`app/` directory)?",
        "Generates the project using the App Router.",
        "Generates the project using the Pages Router.",
    ),
    BooleanOption(
        "use_src_directory", "use_src_directory", "src_directory_prompt",
        "Create a `src/` directory?",
        "Places application code inside `src/`.",
        "Generates files at the project root (no `src/`).",
    ),
    BooleanOption(
        "enable_experimental_app", "experimental_app", "experimental_app_prompt",
        "Enable experimental App Router features?",
        "Opt-in to experimental App Router capabilities.",
        "Leaves experimental App Router features disabled.",
    ),
    BooleanOption(
        "enable_turbopack", "turbopack", "turbopack_prompt",
        "Use Turbopack for the dev server?",
        "Starts development using Turbopack.",
        "Uses the traditional webpack-based dev server.",
    ),
    BooleanOption(
        "enable_react_compiler", "react_compiler", "react_compiler_prompt",
        "Enable the React Compiler?",
        "Opt-in to the experimental React Compiler.",
        "Keeps the React Compiler disabled.",
    ),
    TextOption(
        "import_alias", "import_alias", "import_alias_prompt",
        "Set module import alias (--import-alias)",
    ),
    BooleanOption(
        "init_shadcn", "shadcn_init", "shadcn_init_prompt",
        "Run shadcn/ui init?",
        "Runs `npx shadcn@latest init` after project creation.",
        "Skips shadcn/ui initialization.",
    ),
    BooleanOption(
        "install_all_shadcn_components", "shadcn_install_all", "shadcn_install_all_prompt",
        "Install all shadcn/ui components?",
        "Runs `npx shadcn@latest add --all` after initialization.",
        "Leaves component installation for later.",
    ),
)


def _validate_alias(value):
    if not value.strip():
        return EMPTY_ALIAS_MESSAGE
    return None


def resolve_boolean_option(option: BooleanOption, config, prompt_config=None):
    fallback = config.get(option.setting_key)
    if not config.get(option.prompt_key):
        return Resolved(fallback)

    outcome = choose(
        option.message,
        1 if fallback else 2,
        [YES, NO],
        descriptions=[option.enable_description, option.disable_description],
        config=prompt_config,
    )
    if is_cancelled(outcome):
        return CANCELLED
    return Resolved(outcome.value == 1)


def resolve_text_option(option: TextOption, config, prompt_config=None):
    """Resolve the import alias; the result is always trimmed and non-empty."""
    fallback = config.get(option.setting_key)
    if not config.get(option.prompt_key):
        if _validate_alias(fallback):
            raise ValidationError(EMPTY_ALIAS_MESSAGE)
        return Resolved(fallback.strip())

    return ask_text(
        option.message,
        default=fallback,
        validate=_validate_alias,
        config=prompt_config,
    )


def resolve_project_options(config, prompt_config=None):
    """Resolve every option in order, stopping at the first cancellation.

    Returns:
        Resolved(ProjectOptions) or CANCELLED.
    """
    values = {}
    for option in OPTIONS:
        if isinstance(option, BooleanOption):
            outcome = resolve_boolean_option(option, config, prompt_config)
        else:
            outcome = resolve_text_option(option, config, prompt_config)
        if is_cancelled(outcome):
            return CANCELLED
        values[option.field_name] = outcome.value
    return Resolved(ProjectOptions(**values))
