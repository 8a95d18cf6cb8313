"""Tests for configuration, the model table and the CLI."""

import json
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from aigentbench.cli import app
from aigentbench.config import FRAMEWORK_ENV_VAR, BenchmarkRunConfig, load_config, load_env
from aigentbench.providers import create_model, model_names

runner = CliRunner()


class TestProviders:
    """Tests for the model table."""
    
    def test_model_names(self):
        assert model_names() == ["gpt-4o-mini", "gpt-4o", "qwen", "llama3.2", "gemma", "deepseek", "gemini"]
    
    def test_openai_needs_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert create_model("gpt-4o-mini") is None
        
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        model = create_model("gpt-4o-mini")
        assert model.provider == "openai"
        assert model.api_key == "sk-test"
        assert "sk-test" not in repr(model)
    
    def test_exact_match_before_prefix(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        assert create_model("gpt-4o").model_name == "gpt-4o"
        assert create_model("gpt-4o-2024-08-06").model_name == "gpt-4o-2024-08-06"
    
    def test_ollama_prefix(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_HOST", "http://gpu-box:11434")
        model = create_model("gemma3:12b")
        
        assert model.provider == "ollama"
        assert model.model_name == "gemma3:12b"
        assert model.base_url == "http://gpu-box:11434"
    
    def test_gemini_needs_key(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        assert create_model("gemini-2.0-flash") is None
    
    def test_unknown(self):
        assert create_model("mystery-model") is None


class TestConfig:
    """Tests for BenchmarkRunConfig."""
    
    def test_defaults(self):
        cfg = BenchmarkRunConfig()
        assert cfg.models == []
        assert cfg.report_path == "comparison_report.md"
        assert cfg.wait_timeout is None
    
    def test_load_config(self, tmp_path: Path):
        path = tmp_path / "bench.json"
        path.write_text(json.dumps({
            "models": ["llama3.2"],
            "capabilities": ["SimpleAgent"],
            "framework": "scripted",
            "framework_kwargs": {"responses": ["Sydney"]},
            "wait_timeout": 30,
        }), encoding="utf-8")
        
        cfg = load_config(path)
        assert cfg.models == ["llama3.2"]
        assert cfg.wait_timeout == 30.0
        assert cfg.framework_kwargs == {"responses": ["Sydney"]}
    
    def test_rejects_bad_timeout(self):
        with pytest.raises(ValueError):
            BenchmarkRunConfig(wait_timeout=0)
    
    def test_framework_from_environment(self, monkeypatch):
        monkeypatch.setenv(FRAMEWORK_ENV_VAR, "mypkg.frameworks:Aigentic")
        assert BenchmarkRunConfig().resolved_framework() == "mypkg.frameworks:Aigentic"
        assert BenchmarkRunConfig(framework="scripted").resolved_framework() == "scripted"
    
    def test_load_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("AIGENTBENCH_TEST_KEY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("AIGENTBENCH_TEST_KEY=abc\n", encoding="utf-8")
        
        assert load_env(str(env_file))
        assert os.environ["AIGENTBENCH_TEST_KEY"] == "abc"
        monkeypatch.delenv("AIGENTBENCH_TEST_KEY")
        
        assert not load_env(str(tmp_path / "missing.env"))
        assert not load_env(None)


class TestCli:
    """Tests for the typer application."""
    
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.stdout
    
    def test_models(self):
        result = runner.invoke(app, ["models"])
        assert result.exit_code == 0
        assert "llama3.2" in result.stdout
    
    def test_capabilities(self):
        result = runner.invoke(app, ["capabilities"])
        assert result.exit_code == 0
        assert "MultiAgentChain" in result.stdout
    
    def test_unknown_model(self):
        result = runner.invoke(app, ["run", "mystery-model", "--env-file", ""])
        assert result.exit_code == 1
        assert "Model unknown or missing authentication: mystery-model" in result.stdout
        assert "gpt-4o-mini" in result.stdout
    
    def test_unknown_capability(self):
        result = runner.invoke(app, ["run", "llama3.2", "-k", "Telepathy", "--env-file", ""])
        assert result.exit_code == 1
        assert "Unknown capability" in result.stdout
    
    def test_missing_framework(self, monkeypatch):
        monkeypatch.delenv(FRAMEWORK_ENV_VAR, raising=False)
        result = runner.invoke(app, ["run", "llama3.2", "--env-file", ""])
        assert result.exit_code == 1
        assert "No framework configured" in result.stdout
    
    def test_rejects_zero_timeout_option(self, tmp_path: Path):
        config_path = tmp_path / "bench.json"
        config_path.write_text(json.dumps({"framework": "scripted", "env_file": None}), encoding="utf-8")
        
        result = runner.invoke(app, ["run", "llama3.2", "-c", str(config_path), "-k", "SimpleAgent", "-t", "0"])
        
        assert result.exit_code == 1
        assert "Invalid options" in result.stdout
        assert "wait_timeout" in result.stdout
    
    def test_missing_config_file(self, tmp_path: Path):
        result = runner.invoke(app, ["run", "llama3.2", "-c", str(tmp_path / "missing.json")])
        
        assert result.exit_code == 1
        assert "Config file not found" in result.stdout
    
    def test_config_file_not_json(self, tmp_path: Path):
        config_path = tmp_path / "bench.json"
        config_path.write_text("{framework: scripted", encoding="utf-8")
        
        result = runner.invoke(app, ["run", "llama3.2", "-c", str(config_path)])
        
        assert result.exit_code == 1
        assert "not valid JSON" in result.stdout
    
    def test_config_file_fails_validation(self, tmp_path: Path):
        config_path = tmp_path / "bench.json"
        config_path.write_text(json.dumps({"wait_timeout": -1}), encoding="utf-8")
        
        result = runner.invoke(app, ["run", "llama3.2", "-c", str(config_path)])
        
        assert result.exit_code == 1
        assert "Invalid config" in result.stdout
    
    def test_run_with_config(self, tmp_path: Path):
        config_path = tmp_path / "bench.json"
        config_path.write_text(json.dumps({
            "framework": "scripted",
            "framework_kwargs": {"responses": ["The capital is Sydney."]},
            "env_file": None,
        }), encoding="utf-8")
        report = tmp_path / "report.md"
        
        result = runner.invoke(app, [
            "run", "llama3.2",
            "-c", str(config_path),
            "-k", "SimpleAgent",
            "-r", str(report),
        ])
        
        assert result.exit_code == 0, result.stdout
        assert "1/1 capability runs succeeded" in result.stdout
        assert "| SimpleAgent | ✅ Success |" in report.read_text(encoding="utf-8")
