PROGRAM_NAME = "weather-cli"
PROGRAM_DESCRIPTION = "Minimalistic command-line weather program. It works with OpenWeather API."
PROGRAM_AUTHORS = "Eva"
PROGRAM_VERSION = "0.1.0"
REPOSITORY_URL = "https://github.com/evasquare/weather-cli"
PYPI_URL = "https://pypi.org/project/weather-cli/"
