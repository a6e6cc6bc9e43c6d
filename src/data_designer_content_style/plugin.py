from data_designer.plugins.plugin import Plugin, PluginType

content_style_plugin = Plugin(
    config_qualified_name="data_designer_content_style.config.ContentStyleColumnConfig",
    impl_qualified_name="data_designer_content_style.generator.ContentStyleColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
