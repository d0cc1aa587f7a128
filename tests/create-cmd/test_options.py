"""Tests for create_cmd.options — stored defaults, prompting and short-circuiting."""

import pytest

from scripted_io import make_config, no_prompts, scripted_prompts
from nextplus.create_cmd.options import (
    OPTIONS,
    BooleanOption,
    ProjectOptions,
    resolve_boolean_option,
    resolve_project_options,
    resolve_text_option,
)
from nextplus.errors import ValidationError
from nextplus.prompts import CANCELLED, Resolved, is_cancelled

_BOOLEAN_OPTIONS = [option for option in OPTIONS if isinstance(option, BooleanOption)]
_ALIAS_OPTION = next(option for option in OPTIONS if option.field_name == "import_alias")


@pytest.mark.unit
class TestStoredDefaultsWithoutPrompting:

    def test_all_defaults_resolved_without_prompting(self):
        outcome = resolve_project_options(make_config(), no_prompts())
        assert outcome == Resolved(ProjectOptions(
            use_typescript=True,
            include_tailwind=True,
            include_eslint=True,
            use_app_router=True,
            use_src_directory=False,
            enable_experimental_app=False,
            enable_turbopack=True,
            enable_react_compiler=False,
            import_alias="@/*",
            init_shadcn=True,
            install_all_shadcn_components=False,
        ))

    @pytest.mark.parametrize("option", _BOOLEAN_OPTIONS, ids=lambda o: o.setting_key)
    @pytest.mark.parametrize("stored", [True, False])
    def test_stored_value_returned_when_prompt_off(self, option, stored):
        config = make_config(**{option.setting_key: stored})
        assert resolve_boolean_option(option, config, no_prompts()) == Resolved(stored)

    def test_stored_alias_is_trimmed(self):
        config = make_config(import_alias="  ~/*  ")
        assert resolve_text_option(_ALIAS_OPTION, config, no_prompts()) == Resolved("~/*")

    def test_blank_stored_alias_raises(self):
        config = make_config(import_alias="   ")
        with pytest.raises(ValidationError, match="Import alias cannot be empty"):
            resolve_text_option(_ALIAS_OPTION, config, no_prompts())


@pytest.mark.unit
class TestPromptedBooleanOption:

    def _typescript(self):
        return next(o for o in _BOOLEAN_OPTIONS if o.setting_key == "typescript")

    def test_yes_selected(self):
        config = make_config(typescript=False, typescript_prompt=True)
        assert resolve_boolean_option(self._typescript(), config, scripted_prompts("1")) == Resolved(True)

    def test_no_selected(self):
        config = make_config(typescript=True, typescript_prompt=True)
        assert resolve_boolean_option(self._typescript(), config, scripted_prompts("2")) == Resolved(False)

    @pytest.mark.parametrize("stored", [True, False])
    def test_empty_input_keeps_stored_default(self, stored):
        config = make_config(typescript=stored, typescript_prompt=True)
        assert resolve_boolean_option(self._typescript(), config, scripted_prompts("")) == Resolved(stored)

    def test_default_is_marked_in_menu(self):
        config = make_config(typescript=False, typescript_prompt=True)
        prompts = scripted_prompts("")
        resolve_boolean_option(self._typescript(), config, prompts)
        displayed = prompts.output.getvalue()
        assert "Enable TypeScript?" in displayed
        assert "2) No [default]" in displayed

    def test_dismissed_prompt_cancels(self):
        config = make_config(typescript_prompt=True)
        assert resolve_boolean_option(self._typescript(), config, scripted_prompts()) is CANCELLED


@pytest.mark.unit
class TestPromptedImportAlias:

    def test_typed_alias_is_trimmed(self):
        config = make_config(import_alias_prompt=True)
        outcome = resolve_text_option(_ALIAS_OPTION, config, scripted_prompts("  #/*  "))
        assert outcome == Resolved("#/*")

    def test_empty_input_uses_stored_alias(self):
        config = make_config(import_alias="~/*", import_alias_prompt=True)
        assert resolve_text_option(_ALIAS_OPTION, config, scripted_prompts("")) == Resolved("~/*")

    def test_empty_alias_rejected_and_reprompted(self):
        config = make_config(import_alias="", import_alias_prompt=True)
        prompts = scripted_prompts("", "  ", "@/*")
        assert resolve_text_option(_ALIAS_OPTION, config, prompts) == Resolved("@/*")
        assert prompts.output.getvalue().count("Import alias cannot be empty") == 2


@pytest.mark.unit
class TestShortCircuit:

    def test_cancel_stops_remaining_prompts(self):
        config = make_config(
            tailwind_prompt=True, eslint_prompt=True, shadcn_init_prompt=True,
        )
        prompts = scripted_prompts("1")
        outcome = resolve_project_options(config, prompts)

        assert is_cancelled(outcome)
        displayed = prompts.output.getvalue()
        assert "Include Tailwind CSS?" in displayed
        assert "Add ESLint?" in displayed
        assert "Run shadcn/ui init?" not in displayed

    def test_prompted_answers_flow_into_options(self):
        config = make_config(
            src_directory_prompt=True,
            import_alias_prompt=True,
            shadcn_install_all_prompt=True,
        )
        outcome = resolve_project_options(config, scripted_prompts("1", "~/*", "1"))
        options = outcome.value
        assert options.use_src_directory is True
        assert options.import_alias == "~/*"
        assert options.install_all_shadcn_components is True
        assert options.use_typescript is True


@pytest.mark.unit
class TestProjectOptions:

    def test_component_setup_wanted_for_either_flag(self):
        base = resolve_project_options(make_config(shadcn_init=False), no_prompts()).value
        assert base.wants_component_setup is False
        install_all = resolve_project_options(
            make_config(shadcn_init=False, shadcn_install_all=True), no_prompts(),
        ).value
        assert install_all.wants_component_setup is True

    def test_options_are_immutable(self):
        options = resolve_project_options(make_config(), no_prompts()).value
        with pytest.raises(AttributeError):
            options.use_typescript = False
