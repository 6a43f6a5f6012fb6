"""
End to end tests of the pytest plugin.
"""

import pytest


class TestPlugin:
    """The cli fixture as seen by a test suite"""

    def test_fixture_is_reset_between_tests(self, pytester):
        pytester.makepyfile("""
            def test_first(cli):
                cli.run_command("echo first; exit 9", fail_non_zero=False)
                cli.see_exit_code_is(9)

            def test_second(cli):
                assert cli.grab_output() == ""
                assert cli.result is None
                cli.see_exit_code_is_not(9)
        """)

        result = pytester.runpytest()

        result.assert_outcomes(passed=2)

    def test_instance_is_shared_by_the_session(self, pytester):
        pytester.makepyfile("""
            seen = []

            def test_first(cli):
                seen.append(cli)

            def test_second(cli, cli_session):
                assert cli is seen[0] is cli_session
        """)

        result = pytester.runpytest()

        result.assert_outcomes(passed=2)

    def test_non_zero_exit_aborts_test(self, pytester):
        pytester.makepyfile("""
            reached = []

            def test_fails(cli):
                cli.run_command("echo broken; exit 2")
                reached.append(True)

            def test_nothing_reached():
                assert reached == []
        """)

        result = pytester.runpytest()

        result.assert_outcomes(passed=1, failed=1)
        result.stdout.fnmatch_lines(["*Result code was 2.*"])

    def test_assertion_failure_is_reported(self, pytester):
        pytester.makepyfile("""
            def test_missing(cli):
                cli.run_command("echo present")
                cli.see_in_output("absent")
        """)

        result = pytester.runpytest()

        result.assert_outcomes(failed=1)
        result.stdout.fnmatch_lines(["*Failed asserting that 'present' contains 'absent'.*"])

    @pytest.mark.parametrize("debug, shown", [("true", True), ("", False)])
    def test_debug_mode_echoes_output(self, pytester, monkeypatch, debug, shown):
        monkeypatch.setenv("TEST_DEBUG", debug)
        pytester.makepyfile("""
            def test_echo(cli):
                cli.run_command("echo from-the-command")
        """)

        result = pytester.runpytest("-s")

        result.assert_outcomes(passed=1)
        assert ("[DEBUG] Command: echo from-the-command" in result.stdout.str()) is shown
