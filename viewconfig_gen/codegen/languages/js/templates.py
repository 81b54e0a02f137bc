"""
Built-in templates for view config modules.

Literal values are passed in already quoted (see the ``js_string``
filter); printed object literals are passed in as text.
"""

# Split so this source file is not itself tagged as generated
GENERATED_MARKER = "@" + "generated"

FILE_BANNER = f"""This code was generated by viewconfig-gen.

Do not edit this file as changes may cause incorrect behavior and will be lost
once the code is regenerated.

@flow

{GENERATED_MARKER} by codegen project: viewconfig_gen"""

FILE_TEMPLATE = """/**
{{ banner | comment(" *") }}
 */

'use strict';

{% if imports %}
{% for statement in imports %}
{{ statement }}
{% endfor %}

{% endif %}
{{ body }}
"""

COMPONENT_TEMPLATE = """let nativeComponentName = {{ native_component_name | js_string }};
{% if deprecated_component_name %}
if (UIManager.hasViewManagerConfig({{ component_name | js_string }})) {
{{ indent }}nativeComponentName = {{ component_name | js_string }};
} else if (UIManager.hasViewManagerConfig({{ deprecated_component_name | js_string }})) {
{{ indent }}nativeComponentName = {{ deprecated_component_name | js_string }};
} else {
{{ indent }}throw new Error({{ missing_component_error | js_string }});
}
{% endif %}

export const __INTERNAL_VIEW_CONFIG = {{ view_config }};

export default NativeComponentRegistry.get(nativeComponentName, () => __INTERNAL_VIEW_CONFIG);
{% if commands %}

{{ commands }}
{% endif %}
"""

FILE_TEMPLATE_NAME = "view_config_file.js.j2"
COMPONENT_TEMPLATE_NAME = "view_config_component.js.j2"

BUILTIN_TEMPLATES = {
    FILE_TEMPLATE_NAME: FILE_TEMPLATE,
    COMPONENT_TEMPLATE_NAME: COMPONENT_TEMPLATE,
}


def missing_component_message(component_name: str, deprecated_name: str) -> str:
    return (
        f'Failed to find native component for either "{component_name}" '
        f'or "{deprecated_name}"'
    )
