import os
from typing import Final

year = os.getenv("AOC_YEAR") or "2023"
user_agent = os.getenv("AOC_USER_AGENT") or "aoc-fetch-inputs (python-requests)"

site_host: Final = ".adventofcode.com"
input_url_template: Final = "https://adventofcode.com/{year}/day/{day}/input"
input_filename_template: Final = "day-{day:02}-input.txt"

# relative to the user's home directory
firefox_profiles_dir: Final = ".mozilla/firefox"
cookie_db_name: Final = "cookies.sqlite"

first_day: Final = 1
last_day: Final = 30

default_profile: Final = "default"
default_target_directory: Final = "./inputs"
