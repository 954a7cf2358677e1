"""Tests for configuration dataclasses and the parameter file reader."""

from dataclasses import replace

import pytest

from datastructures import ConfigurationError, MACinfo

PARAMETERS = """\
# domain
physicalSizeX = 2.0
physicalSizeY = 1.0   # half height
endTime = 5.0
re = 1000

gX = 0.0
gY = -9.81

dirichletTopX = 2.0
dirichletLeftY = 0.5

nCellsX = 40
nCellsY = 20

useDonorCell = false
tau = 0.4
maximumDt = 0.05

pressureSolver = GaussSeidel
epsilon = 1e-6
maximumNumberOfIterations = 2e3
"""


@pytest.fixture
def parameter_file(tmp_path):
    path = tmp_path / "cavity.txt"
    path.write_text(PARAMETERS)
    return path


class TestDefaults:
    def test_lid_driven_cavity_defaults(self):
        config = MACinfo(Re=100.0)
        assert config.dirichlet_top == (1.0, 0.0)
        assert config.dirichlet_bottom == (0.0, 0.0)
        assert config.pressure_solver == "SOR"
        assert config.mesh_width == (0.1, 0.1)

    def test_to_dataframe(self):
        df = MACinfo(Re=100.0, nx=8).to_dataframe()
        assert len(df) == 1
        assert df["nx"].iloc[0] == 8
        assert df["Re"].iloc[0] == 100.0


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"Re": 0.0},
            {"Re": 100.0, "nx": 0},
            {"Re": 100.0, "Lx": -1.0},
            {"Re": 100.0, "end_time": -0.5},
            {"Re": 100.0, "pressure_solver": "Jacobi"},
            {"Re": 100.0, "alpha": 1.2},
            {"Re": 100.0, "tau": 0.0},
            {"Re": 100.0, "maximum_dt": 0.0},
            {"Re": 100.0, "omega": 2.0},
            {"Re": 100.0, "epsilon": 0.0},
            {"Re": 100.0, "maximum_number_of_iterations": 0},
            {"Re": 100.0, "dirichlet_top": (1.0, 0.0, 0.0)},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ConfigurationError):
            MACinfo(**kwargs)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            MACinfo(Re=100.0, pressure_solver="")

    def test_replace_revalidates(self):
        with pytest.raises(ConfigurationError):
            replace(MACinfo(Re=100.0), omega=3.0)

    @pytest.mark.parametrize("kwargs", [{"nx": 4.5}, {"ny": 2.5}])
    def test_fractional_cell_counts_rejected(self, kwargs):
        with pytest.raises(ConfigurationError, match="integers"):
            MACinfo(Re=100.0, Lx=1.0, **kwargs)

    def test_integral_float_cell_counts_become_int(self):
        config = MACinfo(Re=100.0, nx=4.0, ny=8.0, Lx=1.0, Ly=1.0)
        assert (config.nx, config.ny) == (4, 8)
        assert isinstance(config.nx, int)
        assert config.mesh_width == (0.25, 0.125)

    def test_dirichlet_values_become_float_tuples(self):
        config = MACinfo(Re=100.0, dirichlet_top=[2, 0])
        assert config.dirichlet_top == (2.0, 0.0)


class TestParameterFile:
    def test_values_read(self, parameter_file):
        config = MACinfo.from_file(parameter_file)
        assert config.Lx == 2.0
        assert config.Ly == 1.0
        assert config.end_time == 5.0
        assert config.Re == 1000.0
        assert config.g_y == -9.81
        assert (config.nx, config.ny) == (40, 20)
        assert config.use_donor_cell is False
        assert config.tau == 0.4
        assert config.maximum_dt == 0.05
        assert config.pressure_solver == "GaussSeidel"
        assert config.epsilon == 1e-6
        assert config.maximum_number_of_iterations == 2000

    def test_vector_components_merge_with_defaults(self, parameter_file):
        config = MACinfo.from_file(parameter_file)
        assert config.dirichlet_top == (2.0, 0.0)
        assert config.dirichlet_left == (0.0, 0.5)
        assert config.dirichlet_right == (0.0, 0.0)

    def test_overrides_take_precedence(self, parameter_file):
        config = MACinfo.from_file(parameter_file, nx=10, pressure_solver="SOR")
        assert config.nx == 10
        assert config.pressure_solver == "SOR"

    def test_unknown_key_is_logged(self, tmp_path, log_messages):
        path = tmp_path / "p.txt"
        path.write_text("re = 10\nfoo = 3\n")
        config = MACinfo.from_file(path)
        assert config.Re == 10.0
        assert any("WARNING" in m and "foo" in m for m in log_messages)

    def test_unknown_solver_in_file(self, tmp_path):
        path = tmp_path / "p.txt"
        path.write_text("re = 10\npressureSolver = CG\n")
        with pytest.raises(ConfigurationError, match="CG"):
            MACinfo.from_file(path)

    @pytest.mark.parametrize(
        "text, match",
        [
            ("re = ten\n", "line 1"),
            ("re = 10\nnCellsX = 2.5\n", "line 2"),
            ("re = 10\nuseDonorCell = maybe\n", "useDonorCell"),
        ],
    )
    def test_malformed_values(self, tmp_path, text, match):
        path = tmp_path / "p.txt"
        path.write_text(text)
        with pytest.raises(ConfigurationError, match=match):
            MACinfo.from_file(path)

    def test_missing_reynolds_number(self, tmp_path):
        path = tmp_path / "p.txt"
        path.write_text("nCellsX = 4\n")
        with pytest.raises(ConfigurationError, match="re"):
            MACinfo.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            MACinfo.from_file(tmp_path / "missing.txt")

    def test_shipped_parameter_file(self):
        from utils import get_project_root

        config = MACinfo.from_file(get_project_root() / "parameters" / "lid_driven_cavity.txt")
        assert config.Re == 1000.0
        assert config.dirichlet_top == (1.0, 0.0)
