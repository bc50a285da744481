import unittest

from fourier_making_waves.analysis.discrete_model import DiscreteModel
from fourier_making_waves.analysis.waveforms import CUSTOM, SAWTOOTH, SINUSOID, SQUARE, TRIANGLE
from fourier_making_waves.models.axis_tables import DISCRETE_DEFAULT_X_AXIS_DESCRIPTION, DISCRETE_X_AXIS_DESCRIPTIONS
from fourier_making_waves.models.domain import Domain, EquationForm, SeriesType, TickLabelFormat


class TestDiscreteModelBatching(unittest.TestCase):

    def test_construction_computes_charts_once(self):
        model = DiscreteModel()
        self.assertEqual(model.recompute_count, 1)
        self.assertEqual(model.fourier_series.amplitudes, (1.0,) + (0.0,) * 10)
        self.assertEqual(len(model.harmonics_chart.harmonic_data_sets), 11)
        self.assertEqual(len(model.sum_chart.sum_data_set), 1001)

    def test_batch_recomputes_once(self):
        model = DiscreteModel()
        before = model.recompute_count
        with model.batch():
            model.waveform = SQUARE
            model.domain = Domain.TIME
            model.x_axis.zoom_out()
            model.number_of_harmonics = 5
            model.infinite_harmonics_visible = True
        self.assertEqual(model.recompute_count, before + 1)
        self.assertEqual(
            model.fourier_series.amplitudes,
            tuple(SQUARE.get_amplitudes(5, SeriesType.SIN)) + (0.0,) * 6,
        )
        self.assertIs(model.x_axis_description, DISCRETE_X_AXIS_DESCRIPTIONS[3])
        self.assertAlmostEqual(model.sum_chart.sum_data_set.x[-1], 0.75 * model.fourier_series.T)
        self.assertFalse(model.sum_chart.infinite_harmonics_data_set.is_empty)

    def test_each_setter_outside_batch_recomputes(self):
        model = DiscreteModel()
        before = model.recompute_count
        model.waveform = TRIANGLE
        model.series_type = SeriesType.COS
        self.assertEqual(model.recompute_count, before + 2)

    def test_unchanged_value_does_not_recompute(self):
        model = DiscreteModel()
        before = model.recompute_count
        model.waveform = SINUSOID
        model.domain = Domain.SPACE
        model.infinite_harmonics_visible = False
        self.assertEqual(model.recompute_count, before)


class TestDiscreteModelInputs(unittest.TestCase):

    def setUp(self):
        self.corrections = []
        self.model = DiscreteModel(on_sawtooth_with_cosines=lambda: self.corrections.append(True))

    def test_sawtooth_with_cosines_switches_to_sines(self):
        self.model.series_type = SeriesType.COS
        before = self.model.recompute_count
        with self.assertLogs("fourier_making_waves.analysis.discrete_model", level="WARNING"):
            self.model.waveform = SAWTOOTH
        self.assertIs(self.model.series_type, SeriesType.SIN)
        self.assertEqual(self.corrections, [True])
        self.assertEqual(list(self.model.fourier_series.amplitudes), SAWTOOTH.get_amplitudes(11, SeriesType.SIN))
        self.assertEqual(self.model.recompute_count, before + 1)

    def test_cosines_requested_for_sawtooth(self):
        self.model.waveform = SAWTOOTH
        with self.assertLogs("fourier_making_waves.analysis.discrete_model", level="WARNING"):
            self.model.series_type = SeriesType.COS
        self.assertIs(self.model.series_type, SeriesType.SIN)
        self.assertEqual(len(self.corrections), 1)

    def test_domain_change_resets_time_and_equation_form(self):
        model = self.model
        model.domain = Domain.SPACE_AND_TIME
        model.t = 5.0
        model.equation_form = EquationForm.WAVELENGTH_AND_PERIOD
        model.domain = Domain.TIME
        self.assertEqual(model.t, 0.0)
        self.assertIs(model.equation_form, EquationForm.HIDDEN)

        model.equation_form = EquationForm.MODE
        model.domain = Domain.SPACE
        self.assertIs(model.equation_form, EquationForm.MODE)

    def test_equation_form_must_match_domain(self):
        with self.assertRaises(ValueError):
            self.model.equation_form = EquationForm.FREQUENCY
        self.assertIs(self.model.x_axis_tick_label_format, TickLabelFormat.NUMERIC)
        self.model.equation_form = EquationForm.WAVELENGTH
        self.assertIs(self.model.x_axis_tick_label_format, TickLabelFormat.SYMBOLIC)

    def test_negative_time_rejected(self):
        with self.assertRaises(ValueError):
            self.model.t = -1.0

    def test_step_only_advances_space_and_time_while_playing(self):
        model = self.model
        model.step(0.1)
        self.assertEqual(model.t, 0.0)

        model.domain = Domain.SPACE_AND_TIME
        model.step(0.1)
        self.assertAlmostEqual(model.t, 0.1)

        model.is_playing = False
        model.step(0.1)
        self.assertAlmostEqual(model.t, 0.1)
        model.step_once()
        self.assertAlmostEqual(model.t, 0.15)

    def test_manual_amplitude_makes_waveform_custom(self):
        model = self.model
        model.set_harmonic_amplitude(2, 0.5)
        self.assertIs(model.waveform, CUSTOM)
        self.assertEqual(model.fourier_series.amplitudes[:2], (1.0, 0.5))
        model.series_type = SeriesType.COS
        self.assertEqual(model.fourier_series.amplitudes[:2], (1.0, 0.5))
        model.number_of_harmonics = 1
        self.assertEqual(model.fourier_series.amplitudes[:2], (1.0, 0.0))
        with self.assertRaises(ValueError):
            model.set_harmonic_amplitude(2, 0.5)

    def test_out_of_range_manual_amplitude_keeps_waveform(self):
        model = self.model
        waveform = model.waveform
        amplitudes = model.fourier_series.amplitudes
        before = model.recompute_count
        with self.assertRaises(ValueError):
            model.set_harmonic_amplitude(1, 99.0)
        self.assertIs(model.waveform, waveform)
        self.assertEqual(model.fourier_series.amplitudes, amplitudes)
        self.assertEqual(model.recompute_count, before)

    def test_measurement_tools_follow_number_of_harmonics(self):
        model = self.model
        model.wavelength_tool.order = 7
        model.wavelength_tool.is_selected = True
        model.period_tool.order = 2
        model.period_tool.is_selected = True
        model.number_of_harmonics = 4
        self.assertEqual(model.wavelength_tool.order, 4)
        self.assertFalse(model.wavelength_tool.is_selected)
        self.assertEqual(model.wavelength_tool.max_order, 4)
        self.assertEqual(model.period_tool.order, 2)
        self.assertTrue(model.period_tool.is_selected)
        with self.assertRaises(ValueError):
            model.period_tool.order = 5

    def test_infinite_harmonics_overlay(self):
        model = self.model
        model.infinite_harmonics_visible = True
        self.assertTrue(model.sum_chart.infinite_harmonics_data_set.is_empty)
        model.waveform = SQUARE
        self.assertFalse(model.sum_chart.infinite_harmonics_data_set.is_empty)

    def test_reset(self):
        model = self.model
        model.waveform = SQUARE
        model.domain = Domain.SPACE_AND_TIME
        model.t = 3.0
        model.number_of_harmonics = 3
        model.x_axis.zoom_out()
        model.infinite_harmonics_visible = True
        model.is_playing = False
        before = model.recompute_count

        model.reset()

        self.assertEqual(model.recompute_count, before + 1)
        self.assertIs(model.waveform, SINUSOID)
        self.assertIs(model.domain, Domain.SPACE)
        self.assertEqual(model.t, 0.0)
        self.assertTrue(model.is_playing)
        self.assertEqual(model.number_of_harmonics, 11)
        self.assertIs(model.x_axis_description, DISCRETE_DEFAULT_X_AXIS_DESCRIPTION)
        self.assertFalse(model.infinite_harmonics_visible)
        self.assertEqual(model.fourier_series.amplitudes, (1.0,) + (0.0,) * 10)
        self.assertEqual(model.wavelength_tool.max_order, 11)


if __name__ == "__main__":
    unittest.main()
