"""Named loggers with coloured console output and rotating file output."""