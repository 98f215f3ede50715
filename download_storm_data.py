"""
Download the compressed NOAA Storm Data extract (1950-2011).

The file is kept bz2-compressed in the raw layer (data/01_raw/); the
data_processing pipeline reads it directly.
"""

from pathlib import Path

import requests

URL = "https://d396qusza40orc.cloudfront.net/repdata%2Fdata%2FStormData.csv.bz2"
OUTPUT_FILE = Path("data/01_raw/StormData.csv.bz2")


def download_storm_data(url: str = URL, output_file: Path = OUTPUT_FILE) -> str:
    """
    Download the StormData extract unless it is already present.

    Returns:
        str: Path to the compressed CSV file
    """
    if output_file.exists():
        print(f"Already exists, skipping: {output_file}")
        return str(output_file)

    output_file.parent.mkdir(parents=True, exist_ok=True)
    partial_file = output_file.with_suffix(output_file.suffix + ".part")

    print("Downloading NOAA Storm Data extract...")
    print(f"Source: {url}")
    print(f"Target: {output_file}")

    response = requests.get(url, stream=True, timeout=60)
    response.raise_for_status()

    with open(partial_file, "wb") as f:
        for chunk in response.iter_content(chunk_size=8192):
            f.write(chunk)

    partial_file.rename(output_file)
    print(f"Downloaded {output_file.stat().st_size / 1024 / 1024:.1f} MB")

    return str(output_file)


if __name__ == "__main__":
    download_storm_data()
