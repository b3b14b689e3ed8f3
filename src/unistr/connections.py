from importlib import resources

DATA_PACKAGE = 'unistr.data'

class BooleanDataSource:
    csv_path = resources.files(DATA_PACKAGE).joinpath('booleans.csv')
    """ Boolean token table """

class DefaultsDataSource:
    yaml_path = resources.files(DATA_PACKAGE).joinpath('defaults.yaml')
    """ Shared defaults """
