"""tsconfig-init CLI message templates."""

PROMPT_MESSAGES = {
    'project_name': "What is the name of your project?",
    'strictness': "How strict should the typescript compiler be?",
    'strictness_choice': "Select an option",
    'is_transpiler': "Are you transpiling using tsc?",
    'is_library': "Are you building a library?",
    'is_monorepo': "Are you building for a library in a monorepo?",
    'is_dom': "Is your project for a dom (browser) environment?",
    'overwrite': "{path} already exists. Overwrite it?",
}

COMMAND_MESSAGES = {
    'generated': "tsconfig.json has been generated in {directory}",
    'overwriting': "Overwriting existing {path}",
}
