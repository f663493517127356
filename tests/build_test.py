import pytest

from powermock_opens import JavaPlugin, Plugin, Project, Task, TestTask


class _RecordingPlugin(Plugin):
    def __init__(self):
        self.applied_to = []

    def apply(self, project):
        self.applied_to.append(project)


class _NoOpTask(Task):
    pass


def test_project_tree(tmp_path):
    root = Project("root", str(tmp_path))
    lib = Project("lib", str(tmp_path / "lib"), parent=root)
    core = Project("core", str(tmp_path / "lib" / "core"), parent=lib)
    assert root.path == ":"
    assert lib.path == ":lib"
    assert core.path == ":lib:core"
    assert core.root_project is root
    assert root.root_project is root
    assert root.children == [lib]


def test_plugin_applied_once(tmp_path):
    project = Project("root", str(tmp_path))
    plugin = _RecordingPlugin()
    assert project.apply(plugin) is plugin
    assert project.apply(_RecordingPlugin()) is plugin
    assert plugin.applied_to == [project]
    assert project.plugins.has_plugin(_RecordingPlugin)
    assert project.plugins.find_plugin(_RecordingPlugin) is plugin
    assert project.plugins.find_plugin(JavaPlugin) is None


def test_with_type_before_and_after_apply(tmp_path):
    seen = []
    project = Project("root", str(tmp_path))
    project.plugins.with_type(JavaPlugin, lambda p: seen.append(("before", p)))
    java = project.apply(JavaPlugin)
    project.plugins.with_type(JavaPlugin, lambda p: seen.append(("after", p)))
    assert seen == [("before", java), ("after", java)]


def test_with_type_without_plugin(tmp_path):
    seen = []
    project = Project("root", str(tmp_path))
    project.plugins.with_type(JavaPlugin, seen.append)
    project.apply(_RecordingPlugin())
    assert seen == []


def test_tasks_are_lazy(tmp_path):
    configured = []
    project = Project("root", str(tmp_path))
    provider = project.tasks.register("noop", _NoOpTask, configured.append)
    assert configured == []
    assert project.tasks.names() == ["noop"]
    task = provider.get()
    assert configured == [task]
    assert project.tasks.named("noop") is task
    assert configured == [task]
    assert str(task) == ":noop"


def test_configure_each(tmp_path):
    project = Project("root", str(tmp_path))
    sub = Project("sub", str(tmp_path / "sub"), parent=project)
    sub.tasks.register("early", TestTask)
    early = sub.tasks.named("early")
    sub.tasks.register("noop", _NoOpTask)
    sub.tasks.with_type(TestTask).configure_each(lambda t: t.jvm_args(["-ea"]))
    sub.tasks.register("late", TestTask)

    assert early.all_jvm_args == ["-ea"]
    late = sub.tasks.named("late")
    assert late.all_jvm_args == ["-ea"]
    assert str(late) == ":sub:late"
    assert list(sub.tasks.with_type(TestTask)) == [early, late]
    # iterating again must not configure the tasks a second time
    assert [t.all_jvm_args for t in sub.tasks.with_type(TestTask)] == [["-ea"], ["-ea"]]


def test_duplicate_task_aborts(tmp_path):
    project = Project("root", str(tmp_path))
    project.tasks.register("test", TestTask)
    with pytest.raises(SystemExit):
        project.tasks.register("test", TestTask)


def test_unknown_task_aborts(tmp_path, capsys):
    project = Project("root", str(tmp_path))
    with pytest.raises(SystemExit):
        project.tasks.named("test")
    assert "Task test not found" in capsys.readouterr().err


def test_java_plugin_registers_test_task(tmp_path):
    project = Project("root", str(tmp_path))
    project.apply(JavaPlugin)
    assert project.tasks.names() == ["test"]
    assert isinstance(project.tasks.named("test"), TestTask)


def test_test_task_command_line(tmp_path):
    project = Project("root", str(tmp_path))
    project.tasks.register("test", TestTask, java_exe="/jdk/bin/java", main_class="org.junit.platform.console.ConsoleLauncher")
    task = project.tasks.named("test")
    task.jvm_args(["-Xmx512m"])
    task.jvm_args(["@/tmp/opens.argfile"])
    task.test_args = ["--scan-classpath"]
    assert task.all_jvm_args == ["-Xmx512m", "@/tmp/opens.argfile"]
    assert task.command_line() == [
        "/jdk/bin/java",
        "-Xmx512m",
        "@/tmp/opens.argfile",
        "org.junit.platform.console.ConsoleLauncher",
        "--scan-classpath",
    ]


def test_test_task_command_line_without_main_class(tmp_path):
    project = Project("root", str(tmp_path))
    project.tasks.register("test", TestTask, java_exe="java")
    task = project.tasks.named("test")
    task.jvm_args(["-Xmx512m"])
    assert task.main_class is None
    assert task.command_line() == ["java", "-Xmx512m"]
