from labeled_data import (
    LabeledValueFactory,
    LoggingConfig,
    LoggingLevel,
    NamedCollection,
    NameNotFoundError,
    setup_logging,
)

class UserSettings(NamedCollection):
    """Settings of a single user, each with a label for display."""
    def __init__(self):
        factory = LabeledValueFactory({'visible': True})
        super().__init__({
            'username': factory.create('TypingHare'),
            'font_size': factory.create(16),
            'dark_mode': factory.create(False),
        })
        self.get('username').set_meta('label', 'The username of the user.')
        self.get('font_size').set_meta('label', 'The font size.')
        self.get('font_size').set_meta('option_list', [12, 16, 20])
        self.get('dark_mode').set_meta('label', 'Dark Mode')

def main():
    setup_logging(LoggingConfig(level=LoggingLevel.DEBUG))

    settings = UserSettings()

    # Change a value; the default is kept
    settings.get('font_size').set_value(20)
    font_size = settings.get('font_size')
    print(f"Font size: {font_size.get_value()} (default {font_size.get_default_value()})")

    # Visible fields, with their labels
    for name in settings:
        labeled_value = settings[name]
        if labeled_value.get_meta('visible'):
            print(f"{labeled_value.get_meta('label', name)}: {labeled_value.value}")

    # Plain values for whoever consumes them
    print(settings.get_data())

    # Unknown names raise
    try:
        settings.get_value('password')
    except NameNotFoundError as e:
        print(f"Expected error: {e}")

if __name__ == "__main__":
    main()
