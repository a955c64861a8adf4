from django.core.exceptions import ValidationError
from django.test import SimpleTestCase, TestCase

from completion_progress.config import BlockConfig, BlockConfigError

from . import factories


class BlockConfigTests(SimpleTestCase):
    def test_defaults(self):
        config = BlockConfig.from_mapping(None)
        self.assertEqual(config.order_by, "orderbytime")
        self.assertEqual(config.long_bars, "squeeze")
        self.assertFalse(config.show_icons)
        self.assertFalse(config.show_percentage)
        self.assertEqual(config.activities_included, "activitycompletion")
        self.assertEqual(config.selected_activities, ())

    def test_string_flags_from_settings_form(self):
        config = BlockConfig.from_mapping({"show_icons": "1", "show_percentage": "0"})
        self.assertTrue(config.show_icons)
        self.assertFalse(config.show_percentage)

    def test_single_selected_activity_string(self):
        config = BlockConfig.from_mapping({"selected_activities": "assign-3"})
        self.assertEqual(config.selected_activities, ("assign-3",))

    def test_unsupported_choice(self):
        with self.assertRaisesMessage(BlockConfigError, "long_bars"):
            BlockConfig.from_mapping({"long_bars": "stretch"})

    def test_mapping_round_trip(self):
        config = BlockConfig(order_by="orderbycourse", selected_activities=("page-1",))
        self.assertEqual(BlockConfig.from_mapping(config.to_mapping()), config)


class ProgressBlockValidationTests(TestCase):
    def test_invalid_config_is_reported_on_field(self):
        block = factories.create_block(factories.create_course(), {"order_by": "random"})
        with self.assertRaises(ValidationError) as ctx:
            block.full_clean()
        self.assertIn("config", ctx.exception.message_dict)

    def test_get_config(self):
        block = factories.create_block(factories.create_course(), {"title": "My progress"})
        self.assertEqual(block.get_config().title, "My progress")

    def test_invalid_stored_config_falls_back_to_defaults(self):
        block = factories.create_block(factories.create_course(), {"order_by": "bogus"})
        with self.assertLogs("completion_progress.models", level="ERROR") as logs:
            config = block.get_config()
        self.assertEqual(config, BlockConfig())
        self.assertIn("Invalid block config", logs.output[0])
