from fcg.drivers.blast import BLAST
from fcg.errors import ConfigError

driver_modules = {}

homology_search_default = "tblastx"
driver_modules["homology"] = {"tblastx": BLAST}


def get_aligner(target_db, program_name=None, **kwargs):
    """Returns an aligner instance that knows how to search `target_db`"""

    program_name = program_name or homology_search_default

    if program_name not in driver_modules["homology"]:
        raise ConfigError(f"fcg does not know how to run homology searches with '{program_name}'. Known "
                          f"programs are: {', '.join(sorted(driver_modules['homology']))}.")

    return driver_modules["homology"][program_name](target_db, search_program=program_name, **kwargs)
