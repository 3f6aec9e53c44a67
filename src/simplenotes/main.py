# SPDX-License-Identifier: GPL-3.0-or-later

import sys

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from simplenotes.logger import configure_logging


def main(version='0.1.0'):
    configure_logging()

    from simplenotes.application import SimpleNotesApp

    app = SimpleNotesApp(version=version)
    return app.run(sys.argv)


if __name__ == '__main__':
    sys.exit(main())
